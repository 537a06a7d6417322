"""
Pydantic models for nativesql settings and translation results.
"""

from pydantic import BaseModel, Field


class TranslatorSettings(BaseModel):
    """Translation settings read from nativesql.json"""

    escape_processing: bool = Field(True, alias="escapeProcessing")
    split_statements: bool = Field(False, alias="splitStatements")

    class Config:
        populate_by_name = True
        extra = "forbid"


class TranslatedStatement(BaseModel):
    """A statement as received from the client and as sent to the engine"""

    original: str
    native: str
    escape_processing: bool = Field(True, alias="escapeProcessing")

    class Config:
        populate_by_name = True

    @property
    def rewritten(self) -> bool:
        """True if translation changed the statement text"""
        return self.native != self.original
