import enum


class ContentType(str, enum.Enum):
    """
    Editable site content sections, valued by their URL slug.
    """

    ABOUT_US = "about-us"
    CAROUSEL = "carousel"
    WHY_CHOOSE_US = "why-choose-us"


class PresencePolicy(str, enum.Enum):
    """
    Rule deciding whether a field in an update body is applied.

    PROVIDED applies any field present in the body with a non-null value.
    TRUTHY additionally drops empty strings; lists are applied even when empty.
    """

    PROVIDED = "PROVIDED"
    TRUTHY = "TRUTHY"


class FeatureIcon(str, enum.Enum):
    """
    Icon names the admin editor offers for Why-Choose-Us features.
    """

    USERS = "Users"
    STAR = "Star"
    MAP_PIN = "MapPin"
    AWARD = "Award"
    HEART = "Heart"
    GLOBE = "Globe"
    SHIELD = "Shield"
    ZAP = "Zap"
    TRENDING_UP = "TrendingUp"
    CLOCK = "Clock"
