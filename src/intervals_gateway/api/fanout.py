"""
Fan-out / fan-in for independent upstream calls.

Each call runs as its own task, bounded by a semaphore, and all of them meet
at a single gather point. The failure policy decides what happens to the
other tasks when one fails; no policy ever returns a partial result.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Sequence

CallFactory = Callable[[], Awaitable[Any]]


class FailurePolicy(str, Enum):
    # First failure cancels the in-flight siblings, then re-raises
    CANCEL_ON_FAILURE = "cancel_on_failure"
    # Let every call settle, then raise the first failure in call order
    SETTLE_ALL = "settle_all"


@dataclass(frozen=True)
class FanOut:
    limit: int = 4
    policy: FailurePolicy = FailurePolicy.CANCEL_ON_FAILURE

    async def gather(self, calls: Sequence[CallFactory]) -> List[Any]:
        """Run the calls concurrently; results come back in call order."""
        if not calls:
            return []

        semaphore = asyncio.Semaphore(max(1, self.limit))

        async def bounded(call: CallFactory) -> Any:
            async with semaphore:
                return await call()

        tasks = [asyncio.ensure_future(bounded(call)) for call in calls]

        if self.policy is FailurePolicy.SETTLE_ALL:
            results = await asyncio.gather(*tasks, return_exceptions=True)
            for result in results:
                if isinstance(result, BaseException):
                    raise result
            return list(results)

        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def join(self, calls: Mapping[str, CallFactory]) -> Dict[str, Any]:
        """Run named calls concurrently and return {name: result}."""
        names = list(calls)
        results = await self.gather([calls[name] for name in names])
        return dict(zip(names, results))
