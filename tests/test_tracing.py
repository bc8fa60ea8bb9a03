import pytest

from formatkit.tracing import get_tracer, service_span, service_span_sync


def test_get_tracer_defaults_to_package_name():
    assert get_tracer() is not None


def test_service_span_sync_yields_span():
    with service_span_sync("formatkit.test", attributes={"n": 1, "skip": None, "tags": ["a", object()]}) as span:
        assert span is not None


def test_service_span_sync_reraises():
    with pytest.raises(ValueError, match="boom"):
        with service_span_sync("formatkit.test"):
            raise ValueError("boom")


@pytest.mark.asyncio
async def test_service_span_reraises():
    with pytest.raises(KeyError):
        async with service_span("formatkit.test", attributes={"formatkit.format": "json"}):
            raise KeyError("json")
