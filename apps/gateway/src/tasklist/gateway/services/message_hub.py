"""MessageHub -- 内存中 topic 广播器

每个订阅者持有一个 asyncio.Queue，支持 subscribe/unsubscribe/broadcast。
消息不持久化，队列满的订阅者直接摘除。
"""

import asyncio
from collections import defaultdict

from tasklist.core.models import OutputMessage


class MessageHub:
    """topic 广播器 -- 基于 asyncio.Queue 的发布/订阅模式"""

    def __init__(self, queue_maxsize: int = 100) -> None:
        # topic -> set of asyncio.Queue
        self._subscribers: dict[str, set[asyncio.Queue]] = defaultdict(set)
        self._queue_maxsize = queue_maxsize

    async def subscribe(self, topic: str) -> asyncio.Queue:
        """订阅 topic

        Args:
            topic: topic 名称，如 /topic/messages

        Returns:
            asyncio.Queue 实例，新消息会被推送到此队列
        """
        queue: asyncio.Queue = asyncio.Queue(maxsize=self._queue_maxsize)
        self._subscribers[topic].add(queue)
        return queue

    async def unsubscribe(self, topic: str, queue: asyncio.Queue) -> None:
        """取消订阅"""
        self._subscribers[topic].discard(queue)
        if not self._subscribers[topic]:
            del self._subscribers[topic]

    def is_subscribed(self, topic: str, queue: asyncio.Queue) -> bool:
        """队列是否仍在 topic 的订阅者中（满队列会被 broadcast 摘除）"""
        return queue in self._subscribers.get(topic, ())

    async def broadcast(self, topic: str, message: OutputMessage) -> int:
        """向 topic 的所有订阅者广播消息

        Returns:
            成功投递的订阅者数量
        """
        delivered = 0
        dead_queues = []
        for queue in self._subscribers.get(topic, set()):
            try:
                queue.put_nowait(message)
                delivered += 1
            except asyncio.QueueFull:
                dead_queues.append(queue)

        # 清理已满的队列
        for q in dead_queues:
            self._subscribers[topic].discard(q)
        if topic in self._subscribers and not self._subscribers[topic]:
            del self._subscribers[topic]

        return delivered
