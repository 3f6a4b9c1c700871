"""Async Result support: AsyncResult and the awaitable conversion entry point."""

from klaw_match.async_.result import AsyncResult, to_async_result

__all__ = ['AsyncResult', 'to_async_result']
