from __future__ import annotations
from typing import Any, Literal, Mapping

from pydantic import ConfigDict, Field

from kidsout.models.base import BaseAttributes, Resource


class CurrencyAttributes(BaseAttributes):
    name: str | None = None
    code: str | None = None  # "RUB", "USD"
    symbol: str | None = None


class Currency(Resource[CurrencyAttributes]):
    type: Literal["currencies"] = "currencies"


class CurrencyRateAttributes(BaseAttributes):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    from_: str = Field(alias="from")
    to: str
    rate: float


class CurrencyRate(Resource[CurrencyRateAttributes]):
    type: Literal["currency_rates"] = "currency_rates"


class CurrencyRateModel:
    """Flat `from -> to` exchange rate."""

    __slots__ = ("from_", "to", "rate")

    def __init__(self, data: CurrencyRateAttributes | Mapping[str, Any]) -> None:
        if not isinstance(data, CurrencyRateAttributes):
            data = CurrencyRateAttributes.model_validate(data)
        self.from_ = data.from_
        self.to = data.to
        self.rate = data.rate

    def __repr__(self) -> str:
        return f"CurrencyRateModel(from_={self.from_!r}, to={self.to!r}, rate={self.rate!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurrencyRateModel):
            return NotImplemented
        return (self.from_, self.to, self.rate) == (other.from_, other.to, other.rate)

    @classmethod
    def from_list_response(cls, resp) -> list["CurrencyRateModel"]:
        return [cls(item.attributes) for item in resp.data]
