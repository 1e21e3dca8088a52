"""Closed token sets accepted by the event catalog API."""
from enum import Enum, IntFlag

class EventType(str, Enum):
    GENERAL_MEETING = "internal__general_meeting"
    VOLUNTEER_MEETING = "internal__volunteer_meeting"
    SECTION_MEETING = "internal__section_meeting"
    VOLUNTEERING = "public__volunteering__only_volunteering"
    VOLUNTEERING_WITH_EXPERIENCE = "public__volunteering__with_experience"
    EXPERIENCE = "public__only_experiential"
    SPORTS = "public__sports"
    LECTURE = "public__educational__lecture"
    COURSE = "public__educational__course"
    OHB = "public__educational__ohb"
    EDUCATIONAL = "public__educational__educational"
    EDUCATIONAL_WITH_STAY = "public__educational__educational_with_stay"
    CLUB_LECTURE = "public__club__lecture"
    CLUB_MEETING = "public__club__meeting"
    FOR_PUBLIC = "public__other__for_public"
    EXHIBITION = "public__other__exhibition"
    ECO_TENT = "public__other__eco_tent"
    WALK = "public__other__walk"

class Program(str, Enum):
    MONUMENTS = "monuments"
    NATURE = "nature"
    CHILDREN_SECTION = "children_section"
    ECO_TENT = "eco_tent"
    HOLIDAYS_WITH_BRONTOSAURUS = "holidays_with_brontosaurus"
    EDUCATION = "education"
    INTERNATIONAL = "international"
    NONE = "none"

class TargetGroup(str, Enum):
    EVERYONE = "for_all"
    ADULTS = "for_young_and_adult"
    CHILDREN = "for_kids"
    FAMILIES = "for_parents_with_kids"
    FIRST_TIME_ATTENDEES = "for_first_time_participant"

class Ordering(str, Enum):
    DATE_FROM = "date_from"
    DATE_TO = "date_to"

class EventFilter(IntFlag):
    # Preset combinators documented at https://bis.brontosaurus.cz/myr.php
    CLUB = 1
    WEEKEND = 2
    CAMP = 4
    EKOSTAN = 8
