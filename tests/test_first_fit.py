from container_packer.geometry import boxes_overlap, placement_bounds
from container_packer.models import Container, Item
from container_packer.packing.first_fit import FirstFit, FirstFitDecreasing


def assert_within_container(container, placements):
    for p in placements:
        x1, y1, z1, x2, y2, z2 = placement_bounds(p)
        assert x1 >= 0 and y1 >= 0 and z1 >= 0
        assert x2 <= container.length
        assert y2 <= container.width
        assert z2 <= container.height


def assert_no_overlaps(placements):
    bounds = [placement_bounds(p) for p in placements]
    for i in range(len(bounds)):
        for j in range(i + 1, len(bounds)):
            assert not boxes_overlap(bounds[i], bounds[j])


def three_items():
    return [
        Item(id="A", length=8, width=8, height=8),
        Item(id="B", length=3, width=3, height=3),
        Item(id="C", length=12, width=1, height=1),
    ]


def test_case_10_cube():
    container = Container(id="10", length=10, width=10, height=10)

    outcome = FirstFitDecreasing().run(container, three_items())

    assert [i.id for i in outcome.packed_items] == ["A"]
    assert [i.id for i in outcome.unpacked_items] == ["B", "C"]
    assert outcome.is_complete_pack is False

    assert_within_container(container, outcome.placements)
    assert_no_overlaps(outcome.placements)


def test_case_11_cube():
    container = Container(id="11", length=11, width=11, height=11)

    outcome = FirstFitDecreasing().run(container, three_items())

    assert [i.id for i in outcome.packed_items] == ["A", "B"]
    assert [i.id for i in outcome.unpacked_items] == ["C"]

    assert_within_container(container, outcome.placements)
    assert_no_overlaps(outcome.placements)


def test_case_12_10_10():
    container = Container(id="12", length=12, width=10, height=10)

    outcome = FirstFitDecreasing().run(container, three_items())

    assert [i.id for i in outcome.packed_items] == ["A", "B", "C"]
    assert outcome.unpacked_items == []
    assert outcome.is_complete_pack is True

    assert_within_container(container, outcome.placements)
    assert_no_overlaps(outcome.placements)


def test_quantity_expands_into_units_and_marks_lines():
    container = Container(id=1, length=3, width=3, height=3)
    items = [Item(id="B", length=1, width=1, height=1, quantity=30)]

    outcome = FirstFit().run(container, items)

    # 3 per axis => 27 unit cubes fit
    assert len(outcome.packed_items) == 27
    assert len(outcome.unpacked_items) == 3
    assert all(unit.quantity == 1 for unit in outcome.packed_items + outcome.unpacked_items)
    assert items[0].packed_quantity == 27

    assert_within_container(container, outcome.placements)
    assert_no_overlaps(outcome.placements)


def test_first_fit_keeps_input_order():
    container = Container(id=1, length=10, width=10, height=10)
    items = [
        Item(id="small", length=3, width=3, height=3),
        Item(id="big", length=8, width=8, height=8),
    ]

    ffd = FirstFitDecreasing().run(container, [i.model_copy() for i in items])
    ff = FirstFit().run(container, [i.model_copy() for i in items])

    assert [i.id for i in ffd.packed_items] == ["big"]
    assert [i.id for i in ff.packed_items] == ["small"]
