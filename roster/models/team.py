#roster/models/team.py
from datetime import date
from pydantic import BaseModel, Field

class Team(BaseModel):
    """
    Team — зарегистрированная команда. После создания не меняется.
    """
    id: int = Field(..., description="ID команды (задаётся вызывающим)")
    name: str = Field(..., examples=["Internacional"], description="Название команды")
    created_on: date = Field(..., description="Дата основания")
    primary_color: str = Field(..., examples=["Red"], description="Основной цвет формы")
    secondary_color: str = Field(..., examples=["White"], description="Запасной цвет формы")

    model_config = {"frozen": True}

    def __repr__(self):
        return f"<Team(id={self.id}, name='{self.name}')>"
