from database.store import DocumentStore
from schemas.dashboard import BookedSessionItem, DashboardUser, DashboardView, DoubtItem


def build_dashboard(store: DocumentStore, user_id: str) -> DashboardView | None:
    user = store.find_user_by_id(user_id)
    if not user:
        return None

    doubts = store.find_doubts_by_user(user_id)
    bookings = store.find_booked_sessions_by_user(user_id)

    return DashboardView(
        user=DashboardUser(name=user.name, email=user.email),
        doubts=[
            DoubtItem(id=str(d.id), doubt_text=d.doubt_text, image_path=d.image_path, created_at=d.created_at)
            for d in doubts
        ],
        bookasessions=[
            BookedSessionItem(
                id=str(b.id),
                name=b.name,
                email=b.email,
                phone=b.phone,
                subject=b.subject,
                preferred_time=b.preferred_time,
                message=b.message,
            )
            for b in bookings
        ],
    )
