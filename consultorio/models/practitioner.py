from pydantic import BaseModel, ConfigDict, Field


class Practitioner(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str
    password_hash: str = Field(alias="passwordHash")

    def __repr__(self):
        return f"<Practitioner(email='{self.email}')>"
