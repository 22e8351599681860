"""
有界等待单元测试
"""

import asyncio

import pytest

from app.utils.async_utils import Completed, TimedOut, abandoned_task_count, wait_bounded


async def _value_after(delay: float, value):
    await asyncio.sleep(delay)
    return value


async def _fail_after(delay: float):
    await asyncio.sleep(delay)
    raise RuntimeError("provider exploded")


@pytest.mark.unit
class TestWaitBounded:
    """wait_bounded 单元测试类"""

    @pytest.mark.asyncio
    async def test_completes_before_timeout(self):
        outcome = await wait_bounded(_value_after(0, "ok"), timeout=1)

        assert outcome == Completed("ok")

    @pytest.mark.asyncio
    async def test_timeout_returns_timed_out(self):
        outcome = await wait_bounded(_value_after(1, "late"), timeout=0.01)

        assert isinstance(outcome, TimedOut)
        assert outcome.timeout == 0.01

    @pytest.mark.asyncio
    async def test_operation_error_propagates(self):
        with pytest.raises(RuntimeError, match="provider exploded"):
            await wait_bounded(_fail_after(0), timeout=1)

    @pytest.mark.asyncio
    async def test_timed_out_task_is_not_cancelled(self):
        """超时后底层任务继续运行直到结束"""
        finished = asyncio.Event()

        async def slow():
            await asyncio.sleep(0.05)
            finished.set()
            return "late"

        before = abandoned_task_count()
        outcome = await wait_bounded(slow(), timeout=0.01)

        assert isinstance(outcome, TimedOut)
        assert abandoned_task_count() == before + 1

        await asyncio.wait_for(finished.wait(), timeout=1)
        await asyncio.sleep(0)
        assert abandoned_task_count() == before

    @pytest.mark.asyncio
    async def test_abandoned_failure_is_consumed(self):
        """被放弃的任务失败后引用被释放"""
        before = abandoned_task_count()
        outcome = await wait_bounded(_fail_after(0.02), timeout=0.001)

        assert isinstance(outcome, TimedOut)
        await asyncio.sleep(0.05)
        assert abandoned_task_count() == before
