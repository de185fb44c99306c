"""Entity → transfer shape conversions.

Plain field copies except for images: entities store ``image_group`` /
``image_record``, transfer shapes expose both as ``image_url``.
"""

from app.application.schemas import (
    CartDetailResponse,
    CartResponse,
    GroupItemResponse,
    GroupRecordsResponse,
    GroupResponse,
    MusicGenreResponse,
    MusicGenreTotalGroupsResponse,
    OrderDetailResponse,
    OrderResponse,
    RecordItemResponse,
    RecordResponse,
    UserResponse,
)
from app.domain.entities import Cart, Group, MusicGenre, Order, Record, User


def music_genre_to_response(genre: MusicGenre) -> MusicGenreResponse:
    return MusicGenreResponse(id=genre.id, name=genre.name)


def music_genre_to_total_groups(genre: MusicGenre) -> MusicGenreTotalGroupsResponse:
    return MusicGenreTotalGroupsResponse(
        id=genre.id, name=genre.name, total_groups=genre.total_groups or 0
    )


def group_to_item(group: Group) -> GroupItemResponse:
    return GroupItemResponse(
        id=group.id,
        name=group.name,
        image_url=group.image_group,
        music_genre_id=group.music_genre_id,
    )


def group_to_response(group: Group) -> GroupResponse:
    return GroupResponse(
        id=group.id,
        name=group.name,
        image_url=group.image_group,
        music_genre_id=group.music_genre_id,
        music_genre_name=group.music_genre_name,
        total_records=group.total_records,
    )


def group_to_records(group: Group) -> GroupRecordsResponse:
    return GroupRecordsResponse(
        id=group.id,
        name=group.name,
        image_url=group.image_group,
        total_records=len(group.records),
        records=[record_to_item(r) for r in group.records],
    )


def record_to_item(record: Record) -> RecordItemResponse:
    return RecordItemResponse(
        id=record.id,
        title=record.title,
        year_of_publication=record.year_of_publication,
        image_url=record.image_record,
        price=record.price,
        stock=record.stock,
        discontinued=record.discontinued,
        group_id=record.group_id,
    )


def record_to_response(record: Record) -> RecordResponse:
    return RecordResponse(
        id=record.id,
        title=record.title,
        year_of_publication=record.year_of_publication,
        image_url=record.image_record,
        price=record.price,
        stock=record.stock,
        discontinued=record.discontinued,
        group_id=record.group_id,
        group_name=record.group_name,
    )


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id, email=user.email, role=user.role, created_at=user.created_at
    )


def cart_to_response(cart: Cart) -> CartResponse:
    return CartResponse(
        id=cart.id,
        user_id=cart.user_id,
        total_price=cart.total_price,
        enabled=cart.enabled,
        details=[
            CartDetailResponse(
                id=d.id,
                record_id=d.record_id,
                record_title=d.record_title,
                amount=d.amount,
                price=d.price,
                total=d.total,
            )
            for d in cart.details
        ],
    )


def order_to_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        user_id=order.user_id,
        order_date=order.order_date,
        payment_method=order.payment_method,
        total=order.total,
        details=[
            OrderDetailResponse(
                id=d.id,
                record_id=d.record_id,
                record_title=d.record_title,
                amount=d.amount,
                price=d.price,
                total=d.total,
            )
            for d in order.details
        ],
    )
