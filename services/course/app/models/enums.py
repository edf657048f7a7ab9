import enum

from sqlalchemy import Enum as SaEnum


class ChallengeType(str, enum.Enum):
    SELECT = "SELECT"
    ASSIST = "ASSIST"


# Generic Enum so the same metadata also builds on SQLite test databases.
challenge_type_enum = SaEnum(ChallengeType, name="challenge_type")
