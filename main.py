from typing import List

from logging_setup import logger, loglamayi_kur
from Models.Participant import Participant
from roster import OrderedRoster, first_by_sorted_name_descending

DEMO_NAMES = ["멤버1", "멤버2", "멤버3"]


def format_participants(participants: List[Participant]) -> str:
    return "[" + ", ".join(str(p) for p in participants) + "]"


def main():
    loglamayi_kur()
    participants = [Participant(name=name) for name in DEMO_NAMES]
    roster = OrderedRoster.create(participants)
    logger.info("Demo başlatıldı.")

    print(f"roster.view() = {format_participants(roster.view())}")
    # view() canlı listeyi verir; sıralama roster'ın kendisini de değiştirir.
    first_sorted = first_by_sorted_name_descending(roster.view())
    print(f"firstSorted = {first_sorted}")
    print(f"roster.view() = {format_participants(roster.view())}")


if __name__ == "__main__":
    main()
