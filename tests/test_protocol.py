"""Tests for snapshot decoding."""

import json

import pytest

from woods_client.components import Body
from woods_client.entities import Entity
from woods_client.errors import DecodeError
from woods_client.protocol import decode_snapshot, encode_snapshot


def test_decode_single_body(single_body_snapshot: str) -> None:
    entities = decode_snapshot(single_body_snapshot)

    assert len(entities) == 1
    assert entities[0].id == 1
    assert entities[0].body == Body(x=5, y=6, z=0, sx=10, sy=10, sz=10)


def test_decode_preserves_order_and_ids() -> None:
    raw = json.dumps([[7, []], [3, []], [11, []]])

    assert [entity.id for entity in decode_snapshot(raw)] == [7, 3, 11]


def test_entity_without_components_has_no_body() -> None:
    (entity,) = decode_snapshot("[[4, []]]")

    assert entity.body is None
    assert entity.components == {}


def test_unknown_tag_is_ignored_next_to_body() -> None:
    raw = json.dumps(
        [[2, [{"Health": {"hp": 3}}, {"Body": {"x": 1, "y": 2, "z": 3, "sx": 4, "sy": 5, "sz": 6}}]]]
    )

    (entity,) = decode_snapshot(raw)

    assert entity.body == Body(x=1, y=2, z=3, sx=4, sy=5, sz=6)
    assert list(entity.components) == ["Body"]


def test_unknown_tag_payload_is_not_inspected() -> None:
    (entity,) = decode_snapshot('[[2, [{"Future": "anything"}]]]')

    assert entity.body is None


def test_last_body_wins() -> None:
    raw = json.dumps(
        [
            [
                1,
                [
                    {"Body": {"x": 1, "y": 1, "z": 1, "sx": 1, "sy": 1, "sz": 1}},
                    {"Body": {"x": 9, "y": 8, "z": 7, "sx": 6, "sy": 5, "sz": 4}},
                ],
            ]
        ]
    )

    (entity,) = decode_snapshot(raw)

    assert entity.body == Body(x=9, y=8, z=7, sx=6, sy=5, sz=4)


def test_body_fields_are_taken_verbatim() -> None:
    raw = '[[1, [{"Body": {"x": -1e9, "y": 0.5, "z": 12, "sx": 0, "sy": -3, "sz": 1e-9}}]]]'

    (entity,) = decode_snapshot(raw)

    assert entity.body == Body(x=-1e9, y=0.5, z=12, sx=0, sy=-3, sz=1e-9)


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        '{"Body": {}}',
        "42",
        "[1]",
        "[[1]]",
        '[["1", []]]',
        "[[true, []]]",
        '[[1, {"Body": {}}]]',
        "[[1, [5]]]",
        "[[1, [{}]]]",
        '[[1, [{"Body": {"x": 1}, "Other": {}}]]]',
        '[[1, [{"Body": {"x": 1, "y": 2}}]]]',
        '[[1, [{"Body": [1, 2, 3]}]]]',
        "[[1, []], [1, []]]",
        '[[1, [{"Body": {"x": NaN, "y": 0, "z": 0, "sx": 10, "sy": 10, "sz": 10}}]]]',
        '[[1, [{"Body": {"x": 0, "y": -Infinity, "z": 0, "sx": 10, "sy": 10, "sz": 10}}]]]',
        "[" * 100000,
    ],
)
def test_structural_errors_reject_the_whole_snapshot(raw: str) -> None:
    with pytest.raises(DecodeError):
        decode_snapshot(raw)


def test_decode_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        decode_snapshot("{}")


def test_encode_then_decode_keeps_ids_and_fields() -> None:
    first = Entity(id=10)
    first.set_component(Body(x=1.5, y=-2, z=3, sx=10, sy=10, sz=10))
    second = Entity(id=20)

    decoded = decode_snapshot(encode_snapshot([first, second]))

    assert decoded == [first, second]


def test_encode_snapshot_wire_shape() -> None:
    entity = Entity(id=1)
    entity.set_component(Body(x=5, y=6, z=0, sx=10, sy=10, sz=10))

    assert json.loads(encode_snapshot([entity])) == [
        [1, [{"Body": {"x": 5, "y": 6, "z": 0, "sx": 10, "sy": 10, "sz": 10}}]]
    ]
