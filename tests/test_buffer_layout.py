import pytest

from rendercore.buffer_layout import BufferElement, BufferLayout
from rendercore.enums import ElementType, element_size


def _layout():
    return BufferLayout(
        [
            BufferElement("position", ElementType.FLOAT_3),
            BufferElement("color", ElementType.FLOAT_3),
            BufferElement("uv", ElementType.FLOAT_2, normalized=True),
        ]
    )


def test_offsets_are_packed():
    layout = _layout()
    offsets = [element.offset for element in layout]
    assert offsets[0] == 0
    assert offsets[1] == element_size(ElementType.FLOAT_3)
    assert offsets[2] == 2 * element_size(ElementType.FLOAT_3)


def test_stride_is_sum_of_sizes():
    layout = _layout()
    assert layout.stride == sum(element.nbytes for element in layout)


def test_len_and_iteration_order():
    layout = _layout()
    assert len(layout) == 3
    assert [element.name for element in layout] == ["position", "color", "uv"]


def test_add_element_uses_previous_stride():
    layout = _layout()
    previous = layout.stride
    layout.add_element(BufferElement("weight", ElementType.FLOAT_1))
    assert layout[3].offset == previous
    assert layout.stride == previous + element_size(ElementType.FLOAT_1)


def test_source_element_is_not_modified():
    element = BufferElement("color", ElementType.FLOAT_3)
    layout = BufferLayout([BufferElement("position", ElementType.FLOAT_3), element])
    assert element.offset == 0
    assert layout[1].offset == element_size(ElementType.FLOAT_3)


@pytest.mark.parametrize("index", [3, 10, -1])
def test_index_out_of_range(index):
    with pytest.raises(IndexError, match="out of range"):
        _layout()[index]


def test_element_count_and_bytes():
    element = BufferElement("color", ElementType.INT_4)
    assert element.count == 4
    assert element.nbytes == element_size(ElementType.INT_4)


def test_element_string():
    text = str(BufferElement("position", ElementType.FLOAT_3))
    assert text.startswith("<BufferElement\n  name: position\n  type: Float3\n")
    assert "normalized: false" in text


def test_layout_string():
    text = str(_layout())
    assert text.startswith("<BufferLayout({\n")
    assert "[name=uv, type=Float2" in text
    assert "normalized=true]" in text
    assert text.endswith("})>\n")


def test_empty_layout():
    layout = BufferLayout()
    assert len(layout) == 0
    assert layout.stride == 0