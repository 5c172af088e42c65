# Copyright ClusterHQ Inc.  See LICENSE file for details.

"""
Block until an asynchronous result settles.
"""

import asyncio
import inspect

from twisted.internet.defer import Deferred


async def _awaited(awaitable):
    return await awaitable


def wait_for_result(result):
    """
    Run ``result`` to completion on a private asyncio event loop.

    There is no timeout. A ``Deferred`` that is only ever fired by a Twisted
    reactor that is not running will never settle.

    :param result: A coroutine or other awaitable, or a ``Deferred``.
    :raise TypeError: If ``result`` is not asynchronous.
    :raise RuntimeError: If an event loop is already running in this thread.
    :return: The value ``result`` settled with. If it failed, its exception is
        raised instead.
    """
    if not isinstance(result, Deferred) and not inspect.isawaitable(result):
        raise TypeError(
            "Expected an awaitable or a Deferred, got {!r}".format(result))

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        # Otherwise it warns that it was never awaited.
        if inspect.iscoroutine(result):
            result.close()
        raise RuntimeError(
            "Cannot wait for an asynchronous result from inside a running "
            "event loop")

    with asyncio.Runner() as runner:
        if isinstance(result, Deferred):
            result = result.asFuture(runner.get_loop())
        return runner.run(_awaited(result))
