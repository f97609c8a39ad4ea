#!/usr/bin/env python3
"""Interactive CLI script to take the friendship quiz and check on friends.

Usage:
    python play.py                          # take the quiz in English
    python play.py --locale ru              # take the quiz in Russian
    python play.py --friends friends.yaml   # reminders + score for a friend list

Friend list format (YAML):

    - name: Anna
      category: soul_mate
      last_contact: 2024-06-01
      birthday: 1990-06-20

No server, database, or Docker needed.
"""

import argparse
import random
import sys
from datetime import date
from pathlib import Path

import yaml

from app.config import settings
from app.models.friend import Friend
from app.services.catalog_service import catalog_service
from app.services.personality_service import personality_service
from app.services.reminder_service import ReminderService
from app.services.score_service import score_service

# --- ANSI Colors ---
URGENCY_LABELS = {
    "high": "\033[91m[!!!]\033[0m",
    "medium": "\033[93m[!!]\033[0m",
    "low": "\033[90m[!]\033[0m",
}

DIVIDER = "\033[90m" + "─" * 50 + "\033[0m"
ACCENT = "\033[96m"
RESET = "\033[0m"
DIM = "\033[90m"
BOLD = "\033[1m"
YELLOW = "\033[93m"
RED = "\033[91m"


# =============================================================
# Part 1: Quiz
# =============================================================

def ask_question(question, number: int, total: int, can_go_back: bool) -> int | None:
    """Print one question and return the chosen option index, or None to go back."""
    print()
    print(DIVIDER)
    print(f"{DIM}[{number}/{total}]{RESET} {BOLD}{question.text}{RESET}")
    print()
    for i, option in enumerate(question.options, start=1):
        print(f"  \033[97m{i}\033[0m. {option}")
    print()

    valid = [str(i) for i in range(1, len(question.options) + 1)]
    hint = "/".join(valid) + ("/b" if can_go_back else "")
    while True:
        choice = input(f"  Your answer ({hint}): ").strip().lower()
        if choice == "b" and can_go_back:
            return None
        if choice in valid:
            return int(choice) - 1
        print(f"  {RED}Please enter {hint}{RESET}")


def take_quiz(locale: str) -> list[int]:
    """Walk through every question; 'b' steps back to the previous one."""
    questions = catalog_service.quiz_questions(locale)
    answers: list[int] = []

    print()
    print(f"{BOLD}" + "=" * 50 + f"{RESET}")
    print(f"{BOLD}  BuddyBe - what kind of friend are you?{RESET}")
    print(f"{BOLD}" + "=" * 50 + f"{RESET}")

    while len(answers) < len(questions):
        index = len(answers)
        answer = ask_question(questions[index], index + 1, len(questions), can_go_back=index > 0)
        if answer is None:
            answers.pop()
        else:
            answers.append(answer)
    return answers


def show_profile(answers: list[int], locale: str):
    profile = personality_service.build_profile(answers, locale)
    personality = profile.personality

    print()
    print(DIVIDER)
    print(f"\n{BOLD}  {profile.category_name}{RESET}")
    print(f"  {profile.description}")
    print()
    print(f"  {ACCENT}{personality.personality_type}{RESET}")
    print(f"  {YELLOW}{', '.join(personality.traits)}{RESET}")
    print(f"  {personality.description}")
    print(f"  {DIM}{personality.social_style} / {personality.decision_style} / "
          f"{personality.energy_style} / {personality.leadership_style}{RESET}")
    print()


# =============================================================
# Part 2: Friend list check-up
# =============================================================

def load_friends(path: Path) -> list[Friend]:
    """Build unsaved Friend records from a YAML friend list."""
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or []

    return [
        Friend(
            id=i,
            user_id=0,
            name=entry.get("name", f"Friend {i}"),
            category=entry.get("category"),
            last_interaction_date=entry.get("last_contact"),
            birthday=entry.get("birthday"),
        )
        for i, entry in enumerate(raw, start=1)
    ]


def show_checkup(friends: list[Friend], locale: str):
    today = date.today()
    reminders = ReminderService(rng=random.Random()).contact_reminders(friends, today, locale)
    birthdays = ReminderService.birthdays(friends, today)
    score = score_service.friendship_score(friends, today, locale)

    print()
    print(f"{BOLD}" + "=" * 50 + f"{RESET}")
    print(f"{BOLD}  {score.emoji} Friendship score: {score.score}/100 - {score.label}{RESET}")
    print(f"  {DIM}{score.description}{RESET}")
    print(f"  {DIM}on time: {score.on_time_count}  overdue: {score.overdue_count}  "
          f"tracked: {score.total_tracked}{RESET}")
    print(f"{BOLD}" + "=" * 50 + f"{RESET}")

    print(f"\n{BOLD}  Time to reach out{RESET}")
    if not reminders:
        print(f"  {DIM}Nobody is waiting on you.{RESET}")
    for r in reminders:
        label = URGENCY_LABELS[r.urgency.value]
        print(f"  {label} {r.name} {DIM}({r.days_since} days){RESET} - {r.message}")

    print(f"\n{BOLD}  Upcoming birthdays{RESET}")
    if not birthdays:
        print(f"  {DIM}None in the next {settings.BIRTHDAY_WINDOW_DAYS} days.{RESET}")
    for b in birthdays:
        when = "today!" if b.days_until == 0 else f"in {b.days_until} days"
        print(f"  {YELLOW}{b.name}{RESET} {when} {DIM}({b.next_birthday.isoformat()}){RESET}")
    print()


# =============================================================
# Main
# =============================================================

def main():
    parser = argparse.ArgumentParser(description="BuddyBe terminal client")
    parser.add_argument("--locale", default=settings.DEFAULT_LOCALE)
    parser.add_argument("--friends", type=Path, help="YAML friend list to check on")
    args = parser.parse_args()

    if args.friends:
        show_checkup(load_friends(args.friends), args.locale)
        return

    answers = take_quiz(args.locale)
    show_profile(answers, args.locale)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print(f"\n\n{DIM}Bye!{RESET}")
        sys.exit(130)
    except FileNotFoundError as e:
        print(f"{RED}{e}{RESET}")
        sys.exit(1)
