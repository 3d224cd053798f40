"""
비동기 이벤트 버스 — 재고/알림/배송/메일 도메인 이벤트 pub/sub
- Redis Streams 사용 시도, 실패 시 인메모리 asyncio.Queue로 fallback
- 최근 이벤트는 토픽별로 보관하여 조회 API에서 사용
"""

import asyncio
import json
import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Callable, Coroutine

logger = logging.getLogger(__name__)

TOPICS = [
    "inventory.ticked",       # 재고 시뮬레이터 틱 완료
    "inventory.updated",      # 개별 상품 변경 (해결/재고 수정/예약)
    "alerts.changed",         # 활성 알림 집합 변경
    "deliveries.updated",     # 배송 생성/상태 변경
    "notifications.sent",     # 이메일 발송 시도 (성공/실패 포함)
]

# 핸들러 타입: async callable(topic, data)
Handler = Callable[[str, dict], Coroutine[Any, Any, None]]

_QUEUE_SIZE = 10000


def _serialize(data: dict) -> dict[str, str]:
    # 모든 값을 JSON으로 기록해야 bool/None이 문자열로 바뀌지 않는다
    return {k: json.dumps(v, default=str) for k, v in data.items()}


def _deserialize(fields: dict[str, str]) -> dict:
    data = {}
    for k, v in fields.items():
        try:
            data[k] = json.loads(v)
        except (json.JSONDecodeError, TypeError):
            data[k] = v
    return data


class AsyncEventBus:
    """
    비동기 이벤트 버스 — Redis Streams 기반, 인메모리 fallback.

    사용법:
        bus = AsyncEventBus(redis_url="redis://localhost:6379")
        await bus.subscribe("alerts.changed", my_handler)
        await bus.start()
        await bus.publish("alerts.changed", {"total": 9})
    """

    def __init__(self, redis_url: str = "redis://localhost:6379", max_recent: int = 500):
        self._redis_url = redis_url
        self._redis = None
        self._use_redis = False

        self._handlers: dict[str, list[Handler]] = defaultdict(list)
        self._queues: dict[str, asyncio.Queue] = {}

        self._recent_events: dict[str, list[dict]] = defaultdict(list)
        self._max_recent = max_recent

        self._running = False
        self._consumer_tasks: list[asyncio.Task] = []

    @property
    def is_redis(self) -> bool:
        return self._use_redis

    @property
    def is_running(self) -> bool:
        return self._running

    def _queue(self, topic: str) -> asyncio.Queue:
        if topic not in self._queues:
            self._queues[topic] = asyncio.Queue(maxsize=_QUEUE_SIZE)
        return self._queues[topic]

    async def _try_connect_redis(self):
        try:
            import redis.asyncio as aioredis
            self._redis = aioredis.from_url(self._redis_url, decode_responses=True)
            await self._redis.ping()
            self._use_redis = True
            logger.info("AsyncEventBus: Redis 연결 성공")
        except Exception as e:
            logger.warning(f"AsyncEventBus: Redis 연결 실패 ({e}), 인메모리 모드")
            self._redis = None
            self._use_redis = False

    async def subscribe(self, topic: str, handler: Handler):
        """토픽에 핸들러를 구독 등록한다. 같은 핸들러의 중복 등록은 무시."""
        if handler in self._handlers[topic]:
            return
        self._handlers[topic].append(handler)
        self._queue(topic)
        logger.debug(f"구독 등록: {topic} → {handler.__qualname__}")

    async def publish(self, topic: str, data: dict):
        """이벤트를 토픽에 발행한다. 버스가 시작 전이면 최근 이벤트에만 기록."""
        event = {
            "topic": topic,
            "data": data,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        recent = self._recent_events[topic]
        recent.append(event)
        if len(recent) > self._max_recent:
            self._recent_events[topic] = recent[-self._max_recent:]

        if not self._running:
            return

        if self._use_redis and self._redis:
            try:
                fields = _serialize(data)
                fields["_timestamp"] = event["timestamp"]
                await self._redis.xadd(topic, fields, maxlen=1000)
                return
            except Exception as e:
                logger.error(f"Redis publish 실패 ({topic}): {e}")
        self._enqueue_inmemory(topic, event)

    def _enqueue_inmemory(self, topic: str, event: dict):
        queue = self._queue(topic)
        try:
            queue.put_nowait(event)
        except asyncio.QueueFull:
            # 가장 오래된 이벤트를 버리고 새 이벤트 추가
            try:
                queue.get_nowait()
            except asyncio.QueueEmpty:
                pass
            queue.put_nowait(event)

    async def _inmemory_consumer(self, topic: str):
        queue = self._queue(topic)
        while self._running:
            try:
                event = await asyncio.wait_for(queue.get(), timeout=1.0)
                await self._dispatch(topic, event["data"])
            except asyncio.TimeoutError:
                continue
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"인메모리 소비자 에러 ({topic}): {e}")
                await asyncio.sleep(0.1)

    async def _redis_consumer(self, topic: str):
        last_id = "$"  # 새 메시지만 구독
        while self._running:
            try:
                results = await self._redis.xread({topic: last_id}, count=10, block=1000)
                for _stream, messages in results:
                    for msg_id, msg_data in messages:
                        last_id = msg_id
                        fields = {k: v for k, v in msg_data.items() if k != "_timestamp"}
                        await self._dispatch(topic, _deserialize(fields))
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"Redis 소비자 에러 ({topic}): {e}")
                await asyncio.sleep(1.0)

    async def _dispatch(self, topic: str, data: dict):
        for handler in self._handlers.get(topic, []):
            try:
                await handler(topic, data)
            except Exception as e:
                logger.error(f"핸들러 에러 ({topic}, {handler.__qualname__}): {e}")

    async def start(self):
        """이벤트 버스 시작 — 구독된 토픽마다 소비자 태스크 생성"""
        await self._try_connect_redis()
        self._running = True

        for topic in self._handlers:
            if self._use_redis:
                consumer = self._redis_consumer(topic)
                name = f"redis-consumer-{topic}"
            else:
                consumer = self._inmemory_consumer(topic)
                name = f"inmemory-consumer-{topic}"
            self._consumer_tasks.append(asyncio.create_task(consumer, name=name))

        logger.info(
            f"AsyncEventBus 시작: {len(self._consumer_tasks)}개 소비자 "
            f"({'Redis' if self._use_redis else '인메모리'})"
        )

    async def stop(self):
        self._running = False
        for task in self._consumer_tasks:
            task.cancel()
        if self._consumer_tasks:
            await asyncio.gather(*self._consumer_tasks, return_exceptions=True)
        self._consumer_tasks = []

        if self._redis:
            await self._redis.aclose()
            self._redis = None

        logger.info("AsyncEventBus 중지 완료")

    def get_recent(self, topic: str, count: int = 10) -> list[dict]:
        """최근 이벤트 조회 (동기)"""
        return self._recent_events.get(topic, [])[-count:]
