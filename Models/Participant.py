from pydantic import BaseModel, ConfigDict

class Participant(BaseModel):
    """Listedeki bir katılımcıyı temsil eder. Oluşturulduktan sonra değiştirilemez."""
    model_config = ConfigDict(frozen=True)

    name: str

    def __str__(self) -> str:
        return f"Participant{{name='{self.name}'}}"
