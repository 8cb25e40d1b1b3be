from typing import Literal

from kidsout.models.base import BaseAttributes, Resource


class PerkAttributes(BaseAttributes):
    name: str | None = None
    group_name: str | None = None
    description: str | None = None


class Perk(Resource[PerkAttributes]):
    type: Literal["perks"] = "perks"
