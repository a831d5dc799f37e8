import threading

import pytest

from autotagger.common.concurrency.cancel import CancelToken, background
from autotagger.domain.errors import AutoTagCancelled, AutoTagError


def test_fresh_token_is_not_cancelled():
    ctx = background()
    assert ctx.cancelled is False
    ctx.raise_if_cancelled()
    assert ctx.wait(0) is False


def test_cancel_from_another_thread():
    ctx = CancelToken()
    t = threading.Thread(target=ctx.cancel)
    t.start()
    t.join()

    assert ctx.wait(1) is True
    with pytest.raises(AutoTagCancelled) as ei:
        ctx.raise_if_cancelled()
    assert isinstance(ei.value, AutoTagError)
