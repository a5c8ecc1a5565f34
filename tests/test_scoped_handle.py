"""Check sole ownership with ScopedHandle."""

import copy

import pytest

from refhandle import ScopedHandle
from refhandle import SharedHandle
from refhandle.exceptions import APIError
from refhandle.exceptions import NullReferenceError
from refhandle.exceptions import ReleasedHandleError


def test_release(payload_factory, deletion_log):
    payload = payload_factory("X")
    handle = ScopedHandle(payload)
    assert handle
    assert handle.get() is payload
    assert handle.display() == "Name = X"
    handle.release()
    assert deletion_log == ["X"]
    assert not handle
    with pytest.raises(ReleasedHandleError):
        handle.release()
    with pytest.raises(ReleasedHandleError):
        handle.get()
    assert payload.close_count == 1


def test_context_manager(payload_factory, deletion_log):
    with ScopedHandle(payload_factory("X")) as handle:
        assert handle.name == "X"
    assert deletion_log == ["X"]
    assert not handle.is_active()


def test_no_copies(payload_factory, deletion_log):
    """Copies of a sole owner would each free the payload, so copying is refused."""
    handle = ScopedHandle(payload_factory("X"))
    with pytest.raises(APIError):
        copy.copy(handle)
    with pytest.raises(APIError):
        copy.deepcopy(handle)
    handle.release()
    assert deletion_log == ["X"]


def test_detach(payload_factory, deletion_log):
    payload = payload_factory("X")
    handle = ScopedHandle(payload)
    assert handle.detach() is payload
    assert not handle.is_active()
    assert deletion_log == []
    with pytest.raises(ReleasedHandleError):
        handle.detach()


def test_share(payload_factory, deletion_log):
    payload = payload_factory("X")
    scoped = ScopedHandle(payload)
    shared = scoped.share()
    assert isinstance(shared, SharedHandle)
    assert not scoped.is_active()
    assert shared.use_count == 1
    alias = SharedHandle.alias(shared)
    shared.release()
    assert deletion_log == []
    alias.release()
    assert deletion_log == ["X"]


def test_share_keeps_deleter():
    deleted = []
    shared = ScopedHandle("X", deleter=deleted.append).share()
    shared.release()
    assert deleted == ["X"]


def test_requires_payload():
    with pytest.raises(NullReferenceError):
        ScopedHandle(None)


def test_handle_as_payload(payload_factory, deletion_log):
    inner = SharedHandle(payload_factory("X"))
    scoped = ScopedHandle(inner)
    scoped.release()
    assert not inner.is_active()
    assert deletion_log == ["X"]
