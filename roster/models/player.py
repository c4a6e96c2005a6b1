#roster/models/player.py
from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

class Player(BaseModel):
    """
    Player — игрок команды. Меняется только флаг капитана.
    """
    id: int = Field(..., description="ID игрока (задаётся вызывающим)")
    team_id: int = Field(..., description="ID команды")
    name: str = Field(..., examples=["Fernandão"], description="Имя игрока")
    birth_date: date = Field(..., description="Дата рождения")
    skill_level: int = Field(..., description="Уровень мастерства")
    salary: Decimal = Field(..., description="Зарплата (точное десятичное значение)")
    is_captain: bool = Field(False, description="Капитан команды")

    @field_validator("salary", mode="before")
    @classmethod
    def reject_float_salary(cls, v):
        if isinstance(v, float):
            raise ValueError("salary must be a Decimal, int or str, not float")
        return v

    def __repr__(self):
        return f"<Player(id={self.id}, team_id={self.team_id}, name='{self.name}')>"
