from pydantic import BaseModel

class Quote(BaseModel):
    """Quote returned to client, whichever upstream served it"""
    content: str
    author: str

class PrimaryQuote(BaseModel):
    content: str
    author: str

class FallbackQuote(BaseModel):
    q: str
    a: str

    def to_quote(self) -> Quote:
        return Quote(content=self.q, author=self.a)
