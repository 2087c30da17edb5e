import asyncio
import time
from enum import Enum

from timeid.codec import decode_timestamp, encode_timestamp
from timeid.identifier import decode_identifier, new_identifier
from utils.timestamp import format_timestamp, now_millis

class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"

class CheckResult:
    __slots__ = ("name", "status", "msg")

    def __init__(self, name, status, msg=""):
        self.name = name
        self.status = status
        self.msg = msg

    def to_dict(self):
        return {"name": self.name,
                "status": self.status.value,
                "msg": self.msg}

class HealthReport:
    __slots__ = ("status", "checks", "uptime", "timestamp")

    def __init__(self, status, checks, uptime=0):
        self.status = status
        self.checks = checks
        self.uptime = uptime
        self.timestamp = format_timestamp()

    def to_dict(self):
        return {"status": self.status.value,
                "timestamp": self.timestamp,
                "uptime": round(self.uptime, 1),
                "checks": [check.to_dict() for check in self.checks]}

class HealthChecker:
    def __init__(self, ttl=1.0):
        self._checks = {}
        self._cache = None
        self._cache_time = 0
        self._ttl = ttl
        self._start_time = time.time()

    @property
    def uptime(self):
        return time.time() - self._start_time

    def register(self, name, check_fn, critical=True):
        self._checks[name] = (check_fn, critical)

    async def check(self):
        now = time.time()
        if self._cache and now - self._cache_time < self._ttl:
            return self._cache

        results = []
        for name, (check_fn, is_critical) in self._checks.items():
            try:
                result = await asyncio.wait_for(check_fn(), timeout=5)
            except asyncio.TimeoutError:
                result = CheckResult(name, Status.FAIL, "timeout")
            except Exception as exc:
                result = CheckResult(name, Status.FAIL, str(exc))
            results.append((result, is_critical))

        status = Status.OK
        for result, is_critical in results:
            if result.status == Status.FAIL and is_critical:
                status = Status.FAIL
            elif result.status != Status.OK and status == Status.OK:
                status = Status.DEGRADED

        self._cache = HealthReport(status, [result for result, _ in results], now - self._start_time)
        self._cache_time = now
        return self._cache

# Checks
async def check_event_loop():
    await asyncio.sleep(0)
    return CheckResult("loop", Status.OK)

async def check_codec():
    millis = now_millis()
    if decode_timestamp(encode_timestamp(millis)) != millis:
        return CheckResult("codec", Status.FAIL, f"roundtrip@{millis}")
    return CheckResult("codec", Status.OK)

def create_generator_check(prng, suffix_length=12, delimiter=""):
    async def check():
        value = new_identifier(suffix_length=suffix_length, delimiter=delimiter, prng=prng)
        parsed = decode_identifier(value, delimiter)
        if parsed is None:
            return CheckResult("generator", Status.FAIL, f"undecodable {value}")

        # a repeat right after a draw means the state stopped moving
        if new_identifier(parsed.time, suffix_length, delimiter, prng) == value:
            return CheckResult("generator", Status.DEGRADED, "repeat")

        return CheckResult("generator", Status.OK, f"{prng.draws}draws")
    return check
