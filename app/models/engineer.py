from sqlalchemy import Column, Integer, Text
from app.database import Base


class Engineer(Base):
    __tablename__ = "engineers"

    id     = Column(Integer, primary_key=True, autoincrement=True)
    name   = Column(Text)
    branch = Column(Text)

    # No relationship to Mission: missions embed an engineer snapshot, not a join.

    def __repr__(self):
        return f"<Engineer id={self.id} name={self.name} branch={self.branch}>"
