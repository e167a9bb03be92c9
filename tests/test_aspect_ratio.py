import io

import pytest

from cgbench.aspect_ratio import AspectRatioError, check_aspect_ratio


def test_cube_passes_with_ratio_one():
    assert check_aspect_ratio(0.125, 16, 16, 16, "local problem") == 1.0


def test_ratio_equal_to_limit_passes():
    assert check_aspect_ratio(0.5, 8, 16, 12, "grid") == 0.5


def test_flat_shape_is_rejected():
    with pytest.raises(AspectRatioError) as info:
        check_aspect_ratio(0.125, 1, 16, 16, "process grid")
    assert info.value.ratio == 1 / 16
    assert info.value.exit_code == 127
    assert "process grid sizes (1,16,16)" in str(info.value)


def test_message_written_to_stream():
    out = io.StringIO()
    with pytest.raises(AspectRatioError):
        check_aspect_ratio(0.5, 2, 8, 8, "local problem", out)
    text = out.getvalue()
    assert "The local problem sizes (2,8,8) are invalid" in text
    assert text.endswith("The shape should resemble a 3D cube. Please adjust and try again.\n")


def test_passing_shape_writes_nothing():
    out = io.StringIO()
    check_aspect_ratio(0.1, 4, 4, 8, "grid", out)
    assert out.getvalue() == ""