from hypothesis import given, strategies as st

from u8p import ErrorKind, find, is_lead_byte


@given(st.text(min_size=5), st.data())
def test_prefix_is_complete_utf8(text: str, data: st.DataObject) -> None:
    encoded = text.encode("utf-8")
    offset = data.draw(st.integers(min_value=4, max_value=len(encoded) - 1))
    result = find(encoded, offset)
    assert result.ok
    encoded[: result.index].decode("utf-8")
    assert offset - 4 <= result.index <= offset - 1
    assert not any(is_lead_byte(byte) for byte in encoded[result.index + 1 : offset])


@given(st.binary(min_size=1), st.integers(max_value=3))
def test_small_offsets_are_rejected(buffer: bytes, offset: int) -> None:
    assert find(buffer, offset).error is ErrorKind.INVALID_OFFSET


@given(st.binary(min_size=1), st.integers(min_value=0, max_value=16))
def test_offsets_past_the_buffer_are_rejected(buffer: bytes, extra: int) -> None:
    assert find(buffer, len(buffer) + extra).error is ErrorKind.INVALID_OFFSET


@given(st.binary(min_size=5), st.data())
def test_arbitrary_bytes_never_land_on_continuation(buffer: bytes, data: st.DataObject) -> None:
    offset = data.draw(st.integers(min_value=4, max_value=len(buffer) - 1))
    result = find(buffer, offset)
    if result.ok:
        assert is_lead_byte(buffer[result.index])
    else:
        assert result.error is ErrorKind.INVALID_ENCODING
        assert not any(is_lead_byte(byte) for byte in buffer[offset - 4 : offset])
