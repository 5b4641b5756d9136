import json

from stylelog.chat.sessions import InMemoryChatSessionStore, RedisChatSessionStore


def _turn(i):
    return [{"role": "user", "content": f"q{i}"}, {"role": "assistant", "content": f"a{i}"}]


async def test_history_is_trimmed_per_session():
    store = InMemoryChatSessionStore(max_messages=4, max_sessions=10)
    for i in range(3):
        await store.append("s1", _turn(i))
    history = await store.history("s1")
    assert [m["content"] for m in history] == ["q1", "a1", "q2", "a2"]
    assert await store.history("other") == []


async def test_least_recent_session_evicted():
    store = InMemoryChatSessionStore(max_messages=4, max_sessions=2)
    await store.append("a", _turn(0))
    await store.append("b", _turn(0))
    await store.history("a")
    await store.append("c", _turn(0))
    assert len(store) == 2
    assert await store.history("b") == []
    assert await store.history("a") != []


async def test_clear():
    store = InMemoryChatSessionStore()
    await store.append("s", _turn(0))
    await store.clear("s")
    assert await store.history("s") == []


class FakePipeline:
    def __init__(self, redis):
        self.redis = redis
        self.ops = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def rpush(self, key, *values):
        self.ops.append(("rpush", key, values))
        return self

    def ltrim(self, key, start, end):
        self.ops.append(("ltrim", key, start, end))
        return self

    def expire(self, key, ttl):
        self.ops.append(("expire", key, ttl))
        return self

    async def execute(self):
        for op in self.ops:
            if op[0] == "rpush":
                self.redis.lists.setdefault(op[1], []).extend(op[2])
            elif op[0] == "ltrim":
                items = self.redis.lists.get(op[1], [])
                self.redis.lists[op[1]] = items[op[2]:] if op[3] == -1 else items[op[2]:op[3] + 1]
            else:
                self.redis.ttls[op[1]] = op[2]
        return []


class FakeRedis:
    def __init__(self):
        self.lists = {}
        self.ttls = {}

    def pipeline(self, transaction=True):
        return FakePipeline(self)

    async def lrange(self, key, start, end):
        return list(self.lists.get(key, []))

    async def delete(self, key):
        self.lists.pop(key, None)


async def test_redis_store_roundtrip():
    redis = FakeRedis()
    store = RedisChatSessionStore(redis, max_messages=2, ttl_s=60)
    await store.append("s", _turn(0))
    await store.append("s", _turn(1))
    assert [m["content"] for m in await store.history("s")] == ["q1", "a1"]
    assert redis.ttls["chat:s"] == 60
    assert json.loads(redis.lists["chat:s"][0])["role"] == "user"
    await store.clear("s")
    assert await store.history("s") == []
