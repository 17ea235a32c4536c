from config.schema import RoomListConfig
from models.fearnhill import (
    FearnhillClassroom,
    FearnhillDanceStudio,
    FearnhillDramaStudio,
    FearnhillGym,
    FearnhillSection,
    FearnhillSportsHall,
)
from models.highfield import (
    HighfieldBlock,
    HighfieldClassroom,
    HighfieldFloor,
    HighfieldHall,
    HighfieldSportsHall,
)
from models.location import FearnhillLocation, HighfieldLocation


def default_room_list() -> RoomListConfig:
    """Beispiel-Raumliste mit allen Raumarten beider Schulen.

    Highfield:  Hall, Sports Hall, HG05, P327, UG01, H999
    Fearnhill:  FH Sports Hall, FH Gym, FH Dance Studio, FH Drama Studio,
                FH Mu4, FH S12, FH M4, FH E1
    """
    highfield = [
        HighfieldHall(),
        HighfieldSportsHall(),
        HighfieldClassroom(block=HighfieldBlock.HOWARD,
                           floor=HighfieldFloor.ground(), discriminator=5),
        HighfieldClassroom(block=HighfieldBlock.PARKER,
                           floor=HighfieldFloor.upper(3), discriminator=27),
        HighfieldClassroom(block=HighfieldBlock.UNWIN,
                           floor=HighfieldFloor.ground(), discriminator=1),
        HighfieldClassroom(block=HighfieldBlock.HOWARD,
                           floor=HighfieldFloor.upper(9), discriminator=99),
    ]
    fearnhill = [
        FearnhillSportsHall(),
        FearnhillGym(),
        FearnhillDanceStudio(),
        FearnhillDramaStudio(),
        FearnhillClassroom(section=FearnhillSection.MUSIC, discriminator=4),
        FearnhillClassroom(section=FearnhillSection.SCIENCE, discriminator=12),
        FearnhillClassroom(section=FearnhillSection.MATHEMATICS, discriminator=4),
        FearnhillClassroom(section=FearnhillSection.ENGLISH, discriminator=1),
    ]
    return RoomListConfig(
        title="Beispiel-Raumliste",
        locations=[HighfieldLocation(room=r) for r in highfield]
                  + [FearnhillLocation(room=r) for r in fearnhill],
    )
