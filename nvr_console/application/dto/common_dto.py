from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Acknowledgement for commands that return no record"""
    success: bool = True
