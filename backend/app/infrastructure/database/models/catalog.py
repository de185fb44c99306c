"""SQLAlchemy ORM models for the catalog: genres, groups and records."""

from decimal import Decimal

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.database.base import Base


class MusicGenreModel(Base):
    """ORM model — maps to the 'music_genres' table."""

    __tablename__ = "music_genres"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    groups: Mapped[list["GroupModel"]] = relationship(back_populates="music_genre")

    def __repr__(self) -> str:
        return f"<MusicGenreModel(id={self.id}, name='{self.name}')>"


class GroupModel(Base):
    """ORM model — maps to the 'groups' table."""

    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    image_group: Mapped[str | None] = mapped_column(String(500), nullable=True)
    music_genre_id: Mapped[int] = mapped_column(
        ForeignKey("music_genres.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    music_genre: Mapped[MusicGenreModel] = relationship(back_populates="groups")
    records: Mapped[list["RecordModel"]] = relationship(
        back_populates="group", order_by="RecordModel.id"
    )

    def __repr__(self) -> str:
        return f"<GroupModel(id={self.id}, name='{self.name}')>"


class RecordModel(Base):
    """ORM model — maps to the 'records' table."""

    __tablename__ = "records"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    year_of_publication: Mapped[int] = mapped_column(Integer, nullable=False)
    image_record: Mapped[str | None] = mapped_column(String(500), nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    discontinued: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    group_id: Mapped[int] = mapped_column(
        ForeignKey("groups.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    group: Mapped[GroupModel] = relationship(back_populates="records")

    __table_args__ = (
        CheckConstraint("stock >= 0", name="stock_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<RecordModel(id={self.id}, title='{self.title}', stock={self.stock})>"
