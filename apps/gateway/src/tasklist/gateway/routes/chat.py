"""消息广播路由

POST /app/chat: 接收消息，附加当前时刻后广播到 /topic/messages。
GET /topic/messages: SSE 订阅 /topic/messages 的广播消息。
"""

import asyncio
import json
from datetime import datetime

import structlog
from fastapi import APIRouter, Depends
from sse_starlette.sse import EventSourceResponse
from tasklist.core.config import MESSAGES_TOPIC, SSE_HEARTBEAT_INTERVAL
from tasklist.core.models import ChatMessage, OutputMessage

from ..deps import get_message_hub

log = structlog.get_logger()

router = APIRouter()


@router.post("/app/chat", response_model=OutputMessage)
async def send(
    message: ChatMessage,
    message_hub=Depends(get_message_hub),
):
    """接收消息并广播，不持久化"""
    log.info("chat_message_received", sender=message.from_, text=message.text)

    output = OutputMessage(
        from_=message.from_,
        text=message.text,
        time=datetime.now().strftime("%H:%M"),
    )
    await message_hub.broadcast(MESSAGES_TOPIC, output)
    return output


async def message_events(message_hub, heartbeat_interval: float = SSE_HEARTBEAT_INTERVAL):
    """订阅 /topic/messages 并产出 SSE 事件

    空闲时发送心跳；队列因积压被摘除后，取完剩余消息即结束，客户端自行重连。
    """
    queue = await message_hub.subscribe(MESSAGES_TOPIC)
    try:
        while True:
            try:
                output = await asyncio.wait_for(queue.get(), timeout=heartbeat_interval)
            except TimeoutError:
                if not message_hub.is_subscribed(MESSAGES_TOPIC, queue):
                    log.info("sse_subscriber_dropped", topic=MESSAGES_TOPIC)
                    return
                yield {"comment": "heartbeat"}
                continue

            yield {
                "event": "message",
                "data": json.dumps(output.model_dump(by_alias=True), ensure_ascii=False),
            }
    finally:
        await message_hub.unsubscribe(MESSAGES_TOPIC, queue)


@router.get(MESSAGES_TOPIC)
async def stream_messages(message_hub=Depends(get_message_hub)):
    """SSE 消息流 -- 订阅后实时推送，空闲时发送心跳"""
    return EventSourceResponse(message_events(message_hub))
