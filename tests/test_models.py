"""Tests für die Raummodelle (RangedU8, Highfield, Fearnhill, Location)."""

import pytest
from pydantic import ValidationError

from models.ranged import (
    Discriminator,
    FloorLevel,
    OutOfRangeError,
    RangedU8,
    ranged_u8,
)
from models.highfield import (
    HighfieldBlock,
    HighfieldClassroom,
    HighfieldFloor,
    HighfieldHall,
    HighfieldSportsHall,
)
from models.fearnhill import (
    FearnhillClassroom,
    FearnhillDanceStudio,
    FearnhillDramaStudio,
    FearnhillGym,
    FearnhillSection,
    FearnhillSportsHall,
)
from models.location import (
    FearnhillLocation,
    HighfieldLocation,
    location_adapter,
    render_location,
)


def hf_classroom(block: HighfieldBlock, level, number: int) -> HighfieldClassroom:
    floor = HighfieldFloor.ground() if level is None else HighfieldFloor.upper(level)
    return HighfieldClassroom(block=block, floor=floor, discriminator=number)


def fh_classroom(section: FearnhillSection, number: int) -> FearnhillClassroom:
    return FearnhillClassroom(section=section, discriminator=number)


# ─── RANGEDU8 ─────────────────────────────────────────────────────────────────

class TestRangedU8:
    def test_get_returns_value_for_whole_range(self):
        """Jeder Wert im Bereich bleibt unverändert erhalten."""
        for v in range(1, 100):
            assert Discriminator(v).get() == v
        for v in range(1, 10):
            assert FloorLevel(v).get() == v

    @pytest.mark.parametrize("value", [0, 10, 255, -1])
    def test_floor_level_out_of_range(self, value):
        with pytest.raises(OutOfRangeError) as exc:
            FloorLevel(value)
        assert exc.value.value == value
        assert (exc.value.minimum, exc.value.maximum) == (1, 9)

    @pytest.mark.parametrize("value", [0, 100, 256])
    def test_discriminator_out_of_range(self, value):
        with pytest.raises(OutOfRangeError):
            Discriminator(value)

    def test_out_of_range_is_value_error(self):
        """OutOfRangeError lässt sich als ValueError abfangen."""
        with pytest.raises(ValueError):
            Discriminator(100)

    def test_bounds_are_inclusive(self):
        assert Discriminator(1).get() == 1
        assert Discriminator(99).get() == 99

    def test_rejects_non_int(self):
        with pytest.raises(TypeError):
            Discriminator("5")
        with pytest.raises(TypeError):
            Discriminator(True)

    def test_immutable(self):
        d = Discriminator(5)
        with pytest.raises(Exception):
            d.value = 6

    def test_equality_and_hash(self):
        assert Discriminator(5) == Discriminator(5)
        assert Discriminator(5) != Discriminator(6)
        assert len({Discriminator(5), Discriminator(5), Discriminator(7)}) == 2
        assert Discriminator(3) < Discriminator(4)

    def test_ranged_u8_is_cached_per_bounds(self):
        assert ranged_u8(1, 9) is FloorLevel
        assert ranged_u8(1, 99) is Discriminator
        assert issubclass(ranged_u8(0, 3), RangedU8)

    @pytest.mark.parametrize("bounds", [(5, 4), (-1, 3), (0, 256)])
    def test_invalid_bounds(self, bounds):
        with pytest.raises(ValueError):
            ranged_u8(*bounds)

    def test_pickle_round_trip(self):
        import pickle
        for value in (FloorLevel(3), Discriminator(42)):
            restored = pickle.loads(pickle.dumps(value))
            assert restored == value
            assert type(restored) is type(value)

    def test_str(self):
        assert str(Discriminator(7)) == "7"
        assert int(FloorLevel(3)) == 3


# ─── HIGHFIELD ────────────────────────────────────────────────────────────────

class TestHighfield:
    def test_block_codes(self):
        assert HighfieldBlock.HOWARD.render() == "H"
        assert HighfieldBlock.PARKER.render() == "P"
        assert HighfieldBlock.UNWIN.render() == "U"
        assert len(HighfieldBlock) == 3

    def test_floor_render(self):
        assert HighfieldFloor.ground().render() == "G"
        assert HighfieldFloor.ground().is_ground
        for n in range(1, 10):
            assert HighfieldFloor.upper(n).render() == str(n)

    def test_floor_level_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            HighfieldFloor.upper(10)
        with pytest.raises(ValidationError) as exc:
            HighfieldFloor(level=0)
        assert exc.value.errors()[0]["type"] == "out_of_range"

    def test_named_rooms(self):
        assert HighfieldHall().render() == "Hall"
        assert HighfieldSportsHall().render() == "Sports Hall"

    @pytest.mark.parametrize("block, level, number, expected", [
        (HighfieldBlock.HOWARD, None, 5, "HG05"),
        (HighfieldBlock.PARKER, 3, 27, "P327"),
        (HighfieldBlock.UNWIN, None, 1, "UG01"),
        (HighfieldBlock.HOWARD, 9, 99, "H999"),
    ])
    def test_classroom_render(self, block, level, number, expected):
        assert hf_classroom(block, level, number).render() == expected

    def test_classroom_discriminator_always_two_digits(self):
        for n in range(1, 100):
            label = hf_classroom(HighfieldBlock.UNWIN, 2, n).render()
            assert label == f"U2{n:02d}"
            assert len(label) == 4

    def test_classroom_discriminator_out_of_range(self):
        with pytest.raises(ValidationError) as exc:
            hf_classroom(HighfieldBlock.HOWARD, None, 100)
        assert exc.value.errors()[0]["type"] == "out_of_range"

    def test_classroom_accepts_ranged_instance(self):
        room = HighfieldClassroom(
            block=HighfieldBlock.PARKER,
            floor=HighfieldFloor(level=FloorLevel(1)),
            discriminator=Discriminator(12),
        )
        assert room.render() == "P112"
        assert room.discriminator == Discriminator(12)

    def test_classroom_is_frozen_and_comparable(self):
        a = hf_classroom(HighfieldBlock.HOWARD, 1, 3)
        b = hf_classroom(HighfieldBlock.HOWARD, 1, 3)
        assert a == b
        assert hash(a) == hash(b)
        with pytest.raises(ValidationError):
            a.block = HighfieldBlock.UNWIN

    def test_room_without_render_raises(self):
        """Neue Raumklassen ohne eigenes render() fallen nicht still durch."""
        from models.highfield import _HighfieldRoomBase

        class Library(_HighfieldRoomBase):
            kind: str = "library"

        with pytest.raises(NotImplementedError):
            Library().render()

    def test_str_delegates_to_render(self):
        room = hf_classroom(HighfieldBlock.HOWARD, None, 5)
        assert str(room) == "HG05"
        assert str(HighfieldBlock.PARKER) == "P"


# ─── FEARNHILL ────────────────────────────────────────────────────────────────

class TestFearnhill:
    def test_section_codes(self):
        expected = {
            FearnhillSection.SCIENCE: "S",
            FearnhillSection.BUSINESS: "B",
            FearnhillSection.PSHE: "P",
            FearnhillSection.LANGUAGES: "L",
            FearnhillSection.TECHNOLOGY: "T",
            FearnhillSection.MATHEMATICS: "M",
            FearnhillSection.ENGLISH: "E",
            FearnhillSection.MUSIC: "Mu",
            FearnhillSection.HUMANITIES: "H",
            FearnhillSection.IT: "I",
        }
        assert len(FearnhillSection) == 10
        for section, code in expected.items():
            assert section.render() == code

    def test_section_codes_unique(self):
        codes = [s.render() for s in FearnhillSection]
        assert len(set(codes)) == len(codes)

    def test_named_rooms(self):
        assert FearnhillSportsHall().render() == "Sports Hall"
        assert FearnhillGym().render() == "Gym"
        assert FearnhillDanceStudio().render() == "Dance Studio"
        assert FearnhillDramaStudio().render() == "Drama Studio"

    @pytest.mark.parametrize("section, number, expected", [
        (FearnhillSection.MUSIC, 4, "Mu4"),
        (FearnhillSection.SCIENCE, 12, "S12"),
        (FearnhillSection.ENGLISH, 1, "E1"),
        (FearnhillSection.IT, 99, "I99"),
    ])
    def test_classroom_render(self, section, number, expected):
        assert fh_classroom(section, number).render() == expected

    def test_classroom_never_zero_padded(self):
        for n in range(1, 10):
            assert fh_classroom(FearnhillSection.MATHEMATICS, n).render() == f"M{n}"

    def test_music_and_mathematics_distinct(self):
        assert (fh_classroom(FearnhillSection.MUSIC, 4).render()
                != fh_classroom(FearnhillSection.MATHEMATICS, 4).render())


# ─── LOCATION ─────────────────────────────────────────────────────────────────

class TestLocation:
    @pytest.mark.parametrize("location, expected", [
        (HighfieldLocation(room=HighfieldHall()), "Hall"),
        (HighfieldLocation(room=HighfieldSportsHall()), "Sports Hall"),
        (HighfieldLocation(room=hf_classroom(HighfieldBlock.HOWARD, None, 5)), "HG05"),
        (HighfieldLocation(room=hf_classroom(HighfieldBlock.PARKER, 3, 27)), "P327"),
        (FearnhillLocation(room=FearnhillSportsHall()), "FH Sports Hall"),
        (FearnhillLocation(room=FearnhillGym()), "FH Gym"),
        (FearnhillLocation(room=fh_classroom(FearnhillSection.MUSIC, 4)), "FH Mu4"),
        (FearnhillLocation(room=fh_classroom(FearnhillSection.SCIENCE, 12)), "FH S12"),
    ])
    def test_render(self, location, expected):
        assert location.render() == expected
        assert render_location(location) == expected
        assert str(location) == expected

    def test_sports_halls_do_not_collide(self):
        hf = HighfieldLocation(room=HighfieldSportsHall())
        fh = FearnhillLocation(room=FearnhillSportsHall())
        assert hf.render() != fh.render()
        assert hf != fh

    def test_render_is_deterministic(self):
        loc = FearnhillLocation(room=fh_classroom(FearnhillSection.HUMANITIES, 8))
        assert loc.render() == loc.render() == "FH H8"

    def test_room_must_match_school(self):
        """Ein Fearnhill-Raum ist an Highfield nicht zulässig."""
        with pytest.raises(ValidationError):
            HighfieldLocation(room=FearnhillGym())
        with pytest.raises(ValidationError):
            location_adapter.validate_python(
                {"school": "highfield", "room": {"kind": "gym"}}
            )

    def test_adapter_builds_from_plain_data(self):
        loc = location_adapter.validate_python({
            "school": "highfield",
            "room": {
                "kind": "classroom",
                "block": "unwin",
                "floor": {"level": None},
                "discriminator": 1,
            },
        })
        assert isinstance(loc, HighfieldLocation)
        assert loc.render() == "UG01"

    def test_dump_uses_plain_values(self):
        loc = HighfieldLocation(room=hf_classroom(HighfieldBlock.PARKER, 3, 27))
        assert loc.model_dump(mode="json") == {
            "school": "highfield",
            "room": {
                "kind": "classroom",
                "block": "parker",
                "floor": {"level": 3},
                "discriminator": 27,
            },
        }

    def test_json_round_trip(self):
        loc = FearnhillLocation(room=fh_classroom(FearnhillSection.MUSIC, 4))
        restored = location_adapter.validate_json(location_adapter.dump_json(loc))
        assert restored == loc
        assert restored.render() == "FH Mu4"

    def test_json_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            location_adapter.validate_json(
                '{"school": "fearnhill", "room": '
                '{"kind": "classroom", "section": "music", "discriminator": 0}}'
            )
