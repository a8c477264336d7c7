"""Category canonicalization.

Raw category labels are mapped to canonical display names through an explicit
alias table. Lookups are case-insensitive and exact; labels that are not in
the table pass through title-cased.
"""

from typing import Optional

DEFAULT_CATEGORY = "Other"

# Raw label (lower-case) -> canonical display name
CATEGORY_ALIASES: dict[str, str] = {
    # Housing
    "rent": "Rent",
    "housing": "Rent",
    "mortgage": "Mortgage",
    # Utilities
    "electricity": "Electricity",
    "electric": "Electricity",
    "utilities": "Electricity",
    "water": "Water & Sewage",
    "sewage": "Water & Sewage",
    "water & sewage": "Water & Sewage",
    "gas & heating": "Gas & Heating",
    "heating": "Gas & Heating",
    "internet": "Internet & Phone",
    "phone": "Internet & Phone",
    "internet & phone": "Internet & Phone",
    # Food
    "groceries": "Groceries",
    "grocery": "Groceries",
    "supermarket": "Groceries",
    "dining": "Dining Out",
    "dining out": "Dining Out",
    "restaurant": "Dining Out",
    "cafe": "Dining Out",
    "coffee": "Dining Out",
    "takeout": "Dining Out",
    "fast food": "Dining Out",
    # Transportation
    "gas & fuel": "Gas & Fuel",
    "fuel": "Gas & Fuel",
    "gasoline": "Gas & Fuel",
    "public transportation": "Public Transportation",
    "bus": "Public Transportation",
    "train": "Public Transportation",
    "metro": "Public Transportation",
    "rideshare": "Rideshare & Taxi",
    "rideshare & taxi": "Rideshare & Taxi",
    "taxi": "Rideshare & Taxi",
    "uber": "Rideshare & Taxi",
    "lyft": "Rideshare & Taxi",
    "parking": "Parking & Tolls",
    "parking & tolls": "Parking & Tolls",
    "toll": "Parking & Tolls",
    # Subscriptions
    "streaming": "Streaming Services",
    "streaming services": "Streaming Services",
    "subscription": "Streaming Services",
    "software": "Software & Apps",
    "software & apps": "Software & Apps",
    # Shopping
    "shopping": "Shopping",
    "clothing": "Clothing & Fashion",
    "clothes": "Clothing & Fashion",
    "fashion": "Clothing & Fashion",
    "clothing & fashion": "Clothing & Fashion",
    # Entertainment
    "entertainment": "Entertainment",
    "movie": "Entertainment",
    "cinema": "Entertainment",
    "hobby": "Entertainment",
    "hobbies": "Entertainment",
    # Health
    "medical": "Medical & Healthcare",
    "healthcare": "Medical & Healthcare",
    "pharmacy": "Medical & Healthcare",
    "medical & healthcare": "Medical & Healthcare",
    "fitness": "Fitness & Gym",
    "gym": "Fitness & Gym",
    "fitness & gym": "Fitness & Gym",
    "personal care": "Personal Care",
    "haircut": "Personal Care",
    # Education
    "education": "Education",
    "tuition": "Education",
    # Loans and debts
    "loan": "Loan Payments",
    "loan payment": "Loan Payments",
    "loan payments": "Loan Payments",
    "debt": "Debts",
    "debts": "Debts",
    "credit card": "Debts",
    "leasing": "Leasing",
    "lease payment": "Leasing",
    # Income
    "salary": "Salary",
    "income": "Salary",
    "paycheck": "Salary",
    "wage": "Salary",
    "freelance": "Freelance & Side Income",
    "side income": "Freelance & Side Income",
    "freelance & side income": "Freelance & Side Income",
    # Other
    "other": DEFAULT_CATEGORY,
    "misc": DEFAULT_CATEGORY,
    "miscellaneous": DEFAULT_CATEGORY,
}

# Display colours assigned cyclically by rank
CATEGORY_PALETTE: tuple[str, ...] = (
    "#3380E6",  # blue
    "#9966E6",  # purple
    "#66B3E6",  # light blue
    "#FF9933",  # orange
    "#33CC66",  # green
    "#E64D4D",  # red
    "#E6B333",  # yellow
    "#B34DCC",  # magenta
)


def normalize_category(category: Optional[str]) -> str:
    """Return the canonical display name for a raw category label.

    Args:
        category: Raw category label, possibly empty or None

    Returns:
        Canonical name from the alias table, "Other" for blank labels, or the
        label title-cased with collapsed whitespace
    """
    if category is None:
        return DEFAULT_CATEGORY

    cleaned = " ".join(category.split())
    if not cleaned:
        return DEFAULT_CATEGORY

    canonical = CATEGORY_ALIASES.get(cleaned.lower())
    if canonical is not None:
        return canonical

    return cleaned.title()


def palette_color(rank: int) -> str:
    """Return the palette colour for a display rank."""
    return CATEGORY_PALETTE[rank % len(CATEGORY_PALETTE)]
