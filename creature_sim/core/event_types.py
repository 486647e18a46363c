"""이벤트 유형 상수

SocialService와 구독자가 공유하는 이벤트 이름.
"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # creature
    CREATURE_REGISTERED = "creature_registered"
    CREATURE_DIED = "creature_died"

    # social
    SOCIAL_INTERACTION = "social_interaction"
    RELATIONSHIP_SET = "relationship_set"
    RELATIONSHIP_CHANGED = "relationship_changed"
    DEATH_NOTIFIED = "death_notified"
