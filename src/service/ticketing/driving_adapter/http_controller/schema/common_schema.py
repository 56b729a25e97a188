from pydantic import BaseModel, Field


class InsertResponse(BaseModel):
    model_config = {'populate_by_name': True}

    acknowledged: bool = True
    inserted_id: str = Field(alias='insertedId')


class DeleteResponse(BaseModel):
    model_config = {'populate_by_name': True}

    acknowledged: bool = True
    deleted_count: int = Field(alias='deletedCount')
