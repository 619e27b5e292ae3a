"""Sample catalog served by the storefront."""

from datetime import date, time

from events.domain import Capacity, Event, EventId, Money


def _event(
    event_id: str,
    *,
    date_: str,
    time_: str,
    price: str,
    available_tickets: int,
    **fields,
) -> Event:
    return Event(
        id=EventId(event_id),
        date=date.fromisoformat(date_),
        time=time.fromisoformat(time_),
        price=Money.of(price),
        available_tickets=Capacity(available_tickets),
        **fields,
    )


SEED_EVENTS: tuple[Event, ...] = (
    _event(
        "1",
        title="Summer Music Festival 2024",
        description=(
            "Join us for the ultimate summer music experience featuring top artists "
            "from around the world. Dance the night away under the stars with amazing "
            "performances, food trucks, and unforgettable memories."
        ),
        date_="2024-07-15",
        time_="18:00",
        venue="Central Park Amphitheater",
        address="123 Park Avenue, New York, NY 10001",
        price="89.99",
        category="Music",
        available_tickets=500,
        image="/static/events/music-festival.jpg",
        organizer="MegaEvents Inc.",
        featured=True,
    ),
    _event(
        "2",
        title="Tech Innovation Conference",
        description=(
            "Discover the latest in technology and innovation. Network with industry "
            "leaders, attend inspiring keynotes, and explore cutting-edge demos from "
            "startups and established companies."
        ),
        date_="2024-06-20",
        time_="09:00",
        venue="Convention Center Hall A",
        address="456 Tech Boulevard, San Francisco, CA 94105",
        price="299.99",
        category="Technology",
        available_tickets=200,
        image="/static/events/tech-conference.jpg",
        organizer="TechForward",
        featured=True,
    ),
    _event(
        "3",
        title="Food & Wine Tasting Evening",
        description=(
            "An elegant evening of gourmet food pairings and wine tastings from "
            "renowned chefs and sommeliers. Experience culinary artistry in an "
            "intimate setting."
        ),
        date_="2024-06-28",
        time_="19:30",
        venue="The Grand Ballroom",
        address="789 Culinary Street, Los Angeles, CA 90210",
        price="149.99",
        category="Food & Drink",
        available_tickets=80,
        image="/static/events/wine-tasting.jpg",
        organizer="Gourmet Experiences",
    ),
    _event(
        "4",
        title="Art Gallery Opening Night",
        description=(
            "Celebrate contemporary art with local and international artists. Enjoy "
            "live performances, interactive installations, and meet the artists "
            "behind the masterpieces."
        ),
        date_="2024-07-03",
        time_="20:00",
        venue="Modern Art Museum",
        address="321 Gallery Lane, Chicago, IL 60601",
        price="45.00",
        category="Art & Culture",
        available_tickets=150,
        image="/static/events/art-gallery.jpg",
        organizer="Cultural Arts Society",
    ),
    _event(
        "5",
        title="Startup Pitch Competition",
        description=(
            "Watch promising startups pitch their innovative ideas to a panel of "
            "investors. Network with entrepreneurs, investors, and tech enthusiasts "
            "in this dynamic event."
        ),
        date_="2024-06-25",
        time_="14:00",
        venue="Innovation Hub Auditorium",
        address="555 Startup Avenue, Austin, TX 78701",
        price="25.00",
        category="Business",
        available_tickets=300,
        image="/static/events/startup-pitch.jpg",
        organizer="Entrepreneur Network",
    ),
    _event(
        "6",
        title="Comedy Night Spectacular",
        description=(
            "Get ready for an evening of non-stop laughter with acclaimed comedians. "
            "Perfect for a fun night out with friends or a unique date night experience."
        ),
        date_="2024-07-10",
        time_="21:00",
        venue="The Comedy Club",
        address="888 Laugh Street, New York, NY 10002",
        price="35.00",
        category="Entertainment",
        available_tickets=120,
        image="/static/events/comedy-night.jpg",
        organizer="Laugh Factory",
    ),
)
