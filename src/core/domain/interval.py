"""
Interval — замкнутый интервал неотрицательных целых [from, to]

Immutable Pydantic модель. Используется только для подсчёта простых на
интервале. В JSON границы называются "from" / "to".
"""

from pydantic import BaseModel, Field, field_validator


class Interval(BaseModel):
    """
    Замкнутый интервал [start, end], 0 <= start <= end.

    Поля сериализуются под alias "from" / "to".
    """

    start: int = Field(..., ge=0, strict=True, alias="from", description="Нижняя граница (включительно)")
    end: int = Field(..., ge=0, strict=True, alias="to", description="Верхняя граница (включительно)")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("end")
    @classmethod
    def validate_end_not_before_start(cls, v: int, info) -> int:
        """Проверка, что to >= from"""
        if "start" in info.data:
            start = info.data["start"]
            if v < start:
                raise ValueError(f"to {v} must be >= from {start}")
        return v

    @property
    def size(self) -> int:
        """Количество целых в интервале"""
        return self.end - self.start + 1

    def integers(self) -> range:
        """Все целые интервала по возрастанию"""
        return range(self.start, self.end + 1)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.start <= value <= self.end

    def as_tuple(self) -> tuple[int, int]:
        """(from, to)"""
        return (self.start, self.end)
