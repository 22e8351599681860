"""
异步工具模块
提供有界等待等异步辅助函数
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Generic, Set, TypeVar, Union

T = TypeVar('T')

# 超时后被放弃的任务，保持引用直到其自然结束
_abandoned_tasks: Set[asyncio.Future] = set()


@dataclass(frozen=True)
class Completed(Generic[T]):
    """有界等待结果：在超时前完成"""
    value: T


@dataclass(frozen=True)
class TimedOut:
    """有界等待结果：超时"""
    timeout: float


BoundedResult = Union[Completed[T], TimedOut]


def _discard_abandoned(task: asyncio.Future) -> None:
    """放弃的任务结束后释放引用，并取走其异常避免未检索告警"""
    _abandoned_tasks.discard(task)
    if not task.cancelled():
        task.exception()


async def wait_bounded(awaitable: Awaitable[T], timeout: float) -> BoundedResult:
    """
    在限定时间内等待异步操作

    与 asyncio.wait_for 不同，超时后不会取消底层任务，
    任务会在后台继续运行直到结束，其结果被丢弃。
    操作本身抛出的异常会原样向上抛出。

    使用方式：
        outcome = await wait_bounded(provider.generate_image(...), 30)
        if isinstance(outcome, TimedOut):
            ...

    Args:
        awaitable: 要等待的协程或Future
        timeout: 最长等待时间（秒）

    Returns:
        Completed: 操作在超时前完成
        TimedOut: 操作超时
    """
    task = asyncio.ensure_future(awaitable)
    done, _ = await asyncio.wait({task}, timeout=timeout)

    if task in done:
        return Completed(task.result())

    _abandoned_tasks.add(task)
    task.add_done_callback(_discard_abandoned)
    return TimedOut(timeout)


def abandoned_task_count() -> int:
    """获取仍在后台运行的已放弃任务数量"""
    return len(_abandoned_tasks)


__all__ = [
    'Completed',
    'TimedOut',
    'BoundedResult',
    'wait_bounded',
    'abandoned_task_count',
]
