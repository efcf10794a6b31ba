"""Fixed sample records used when the backend is unreachable."""

from hoarding_dashboard.domain.models import UserRecord, UserRole

_SAMPLE_TIMESTAMP = "2025-04-01T00:00:00.000Z"

FALLBACK_TOKEN_PREFIX = "local-"

FALLBACK_ACCOUNTS: dict[str, UserRecord] = {
    "om@demo.com": UserRecord(
        id="1",
        name="Om Raj",
        email="om@demo.com",
        role=UserRole.OWNER,
        avatar="https://showitmax-api.onrender.com/uploads/users/om@demo.com-1743531614757.png",
        phone="+91 98765 43210",
        location="Mumbai",
        company_name="ShowIt Media",
        website="www.showit.media",
        address="123 Business Park, Mumbai",
    ),
    "photo@demo.com": UserRecord(
        id="2",
        name="Photo Grapher",
        email="photo@demo.com",
        role=UserRole.PHOTOGRAPHER,
        avatar="https://showitmax-api.onrender.com/uploads/users/photo@demo.com-1743531685387.png",
        phone="+91 87654 32109",
        location="Delhi",
    ),
    "client@demo.com": UserRecord(
        id="3",
        name="Client User",
        email="client@demo.com",
        role=UserRole.CLIENT,
        avatar="https://i.pravatar.cc/150?u=client",
        phone="+91 76543 21098",
        location="Bangalore",
        company_name="Client Corp",
        website="www.clientcorp.com",
        address="456 Business Zone, Bangalore",
    ),
}


def _hoarding(  # noqa: PLR0913
    hoarding_id: str,
    name: str,
    address: str,
    city: str,
    state: str,
    zip_code: str,
    coordinates: tuple[float, float],
    size: tuple[int, int],
    daily_rate: int,
    status: str,
    sig: int,
) -> dict[str, object]:
    return {
        "_id": hoarding_id,
        "name": name,
        "location": {
            "address": address,
            "city": city,
            "state": state,
            "country": "India",
            "zipCode": zip_code,
            "coordinates": {"latitude": coordinates[0], "longitude": coordinates[1]},
        },
        "size": {"width": size[0], "height": size[1], "unit": "feet"},
        "dailyRate": daily_rate,
        "status": status,
        "images": [f"https://source.unsplash.com/random/800x600?billboard&sig={sig}"],
        "owner": "mock-owner-1",
        "createdAt": _SAMPLE_TIMESTAMP,
        "updatedAt": _SAMPLE_TIMESTAMP,
    }


HOARDINGS: list[dict[str, object]] = [
    _hoarding(
        "mock-hoarding-1",
        "MG Road Billboard",
        "MG Road, Near Metro Station",
        "Bangalore",
        "Karnataka",
        "560001",
        (12.9716, 77.5946),
        (40, 20),
        5000,
        "active",
        1,
    ),
    _hoarding(
        "mock-hoarding-2",
        "Airport Road Display",
        "Airport Road, Terminal 1",
        "Mumbai",
        "Maharashtra",
        "400099",
        (19.0896, 72.8656),
        (60, 30),
        8000,
        "active",
        2,
    ),
    _hoarding(
        "mock-hoarding-3",
        "Highway Digital Board",
        "NH-44, Outer Ring Road",
        "Delhi",
        "Delhi",
        "110001",
        (28.7041, 77.1025),
        (50, 25),
        6500,
        "maintenance",
        3,
    ),
    _hoarding(
        "mock-hoarding-4",
        "Mall Entrance Billboard",
        "Phoenix MarketCity, Whitefield",
        "Bangalore",
        "Karnataka",
        "560066",
        (12.9971, 77.6968),
        (30, 15),
        4500,
        "active",
        4,
    ),
    _hoarding(
        "mock-hoarding-5",
        "Railway Station Display",
        "Central Railway Station, Platform 1",
        "Chennai",
        "Tamil Nadu",
        "600003",
        (13.0827, 80.2707),
        (20, 10),
        3000,
        "inactive",
        5,
    ),
]

CONTRACTS: list[dict[str, object]] = [
    {
        "_id": "mock-contract-1",
        "hoarding": HOARDINGS[0],
        "client": {"_id": "mock-client-1", "name": "ABC Corp", "email": "abc@example.com"},
        "startDate": "2025-04-01",
        "endDate": "2025-06-30",
        "totalAmount": 450000,
        "status": "active",
        "termsAndConditions": "Monthly payments, maintenance included",
    },
    {
        "_id": "mock-contract-2",
        "hoarding": HOARDINGS[1],
        "client": {
            "_id": "mock-client-2",
            "name": "XYZ Industries",
            "email": "xyz@example.com",
        },
        "startDate": "2025-04-01",
        "endDate": "2025-05-31",
        "totalAmount": 480000,
        "status": "active",
        "termsAndConditions": "Upfront payment, client handles creative changes",
    },
]

PHOTOS: list[dict[str, object]] = [
    {
        "_id": "mock-photo-1",
        "hoarding": HOARDINGS[0],
        "url": "https://source.unsplash.com/random/800x600?billboard&sig=4",
        "description": "Morning view of the MG Road billboard",
        "uploadedBy": {"_id": "mock-user-2", "name": "Sarah Photographer"},
        "takenAt": _SAMPLE_TIMESTAMP,
        "status": "approved",
    },
    {
        "_id": "mock-photo-2",
        "hoarding": HOARDINGS[1],
        "url": "https://source.unsplash.com/random/800x600?billboard&sig=5",
        "description": "Airport Road billboard with new creative",
        "uploadedBy": {"_id": "mock-user-2", "name": "Sarah Photographer"},
        "takenAt": _SAMPLE_TIMESTAMP,
        "status": "approved",
    },
]

SEARCH_USERS: list[dict[str, object]] = [
    {
        "_id": "mock-user-1",
        "name": "John Admin",
        "email": "admin@example.com",
        "role": "owner",
        "avatar": "https://i.pravatar.cc/150?u=1",
    },
    {
        "_id": "mock-user-2",
        "name": "Sarah Photographer",
        "email": "photo@example.com",
        "role": "photographer",
        "avatar": "https://i.pravatar.cc/150?u=2",
    },
    {
        "_id": "mock-user-3",
        "name": "Mike Client",
        "email": "client@example.com",
        "role": "client",
        "avatar": "https://i.pravatar.cc/150?u=3",
    },
]

USERS: list[dict[str, object]] = [
    {
        "_id": "1",
        "name": "Admin User",
        "email": "admin@showit.max",
        "role": "owner",
        "avatar": "https://i.pravatar.cc/150?u=admin",
        "phone": "+91 98765 43210",
        "location": "Mumbai",
        "companyName": "ShowIt Media",
        "website": "www.showit.media",
        "address": "123 Business Park, Mumbai",
    },
    {
        "_id": "2",
        "name": "Photographer User",
        "email": "photo@showit.max",
        "role": "photographer",
        "avatar": "https://i.pravatar.cc/150?u=photographer",
        "phone": "+91 87654 32109",
        "location": "Delhi",
    },
    {
        "_id": "3",
        "name": "Client User",
        "email": "client@showit.max",
        "role": "client",
        "avatar": "https://i.pravatar.cc/150?u=client",
        "phone": "+91 76543 21098",
        "location": "Bangalore",
        "companyName": "Client Corp",
        "website": "www.clientcorp.com",
        "address": "456 Business Zone, Bangalore",
    },
    {
        "_id": "4",
        "name": "John Smith",
        "email": "john@showit.max",
        "role": "photographer",
        "avatar": "https://i.pravatar.cc/150?u=john",
        "phone": "+91 67890 12345",
        "location": "Chennai",
    },
    {
        "_id": "5",
        "name": "Sarah Johnson",
        "email": "sarah@showit.max",
        "role": "client",
        "avatar": "https://i.pravatar.cc/150?u=sarah",
        "phone": "+91 56789 01234",
        "location": "Hyderabad",
        "companyName": "Johnson Media",
    },
]


def _client(  # noqa: PLR0913
    client_id: str,
    name: str,
    email: str,
    contact_person: str,
    location: str,
    status: str,
    counts: tuple[int, int],
    website: str,
    address: str,
    phone: str,
) -> dict[str, object]:
    return {
        "_id": client_id,
        "name": name,
        "email": email,
        "role": "client",
        "avatar": f"https://i.pravatar.cc/150?u={email.split('@')[0]}",
        "phone": phone,
        "location": location,
        "contactPerson": contact_person,
        "status": status,
        "hoardingsCount": counts[0],
        "contractsCount": counts[1],
        "companyName": name,
        "website": website,
        "address": address,
    }


CLIENTS: list[dict[str, object]] = [
    _client(
        "1",
        "Supernova Advertising",
        "robert@supernovaads.com",
        "Robert Smith",
        "Bangalore",
        "active",
        (7, 4),
        "www.supernovaads.com",
        "123 Business Park, Bangalore",
        "+1 555-123-4567",
    ),
    _client(
        "2",
        "Vision Media Group",
        "emily@visionmedia.com",
        "Emily Wong",
        "Mumbai",
        "active",
        (12, 3),
        "www.visionmedia.com",
        "456 Tech Park, Mumbai",
        "+1 555-987-6543",
    ),
    _client(
        "3",
        "Fusion Brands",
        "michael@fusionbrands.com",
        "Michael Johnson",
        "Delhi",
        "inactive",
        (0, 0),
        "www.fusionbrands.com",
        "789 Business Hub, Delhi",
        "+1 555-456-7890",
    ),
    _client(
        "4",
        "Spark Promotions",
        "anjali@sparkpromo.com",
        "Anjali Patel",
        "Hyderabad",
        "active",
        (5, 2),
        "www.sparkpromo.com",
        "101 Promo Plaza, Hyderabad",
        "+1 555-789-0123",
    ),
    _client(
        "5",
        "Client Corp",
        "client@demo.com",
        "Client User",
        "Bangalore",
        "active",
        (2, 1),
        "www.clientcorp.com",
        "456 Business Zone, Bangalore",
        "+91 76543 21098",
    ),
]


def client_contracts(client_id: str) -> list[dict[str, object]]:
    """Return sample contracts owned by a client."""
    return [
        {
            "_id": "c1",
            "clientId": client_id,
            "title": "MG Road Campaign",
            "startDate": "2025-04-01",
            "endDate": "2025-05-01",
            "status": "active",
            "totalAmount": 125000,
        },
        {
            "_id": "c2",
            "clientId": client_id,
            "title": "Airport Promotion",
            "startDate": "2025-04-01",
            "endDate": "2025-05-31",
            "status": "active",
            "totalAmount": 250000,
        },
    ]
