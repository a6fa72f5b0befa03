"""Interactive course planner menu"""

import argparse
import re
from collections.abc import Callable

from course_planner.catalog import (
    CatalogLoadError,
    CatalogNotLoadedError,
    CatalogQueryError,
    CatalogStore,
)
from course_planner.formatting import render_course_detail, render_course_list
from course_planner.log import configure_logging
from course_planner.settings import settings

MENU = (
    'Welcome to the course planner.\n'
    '1. Load Data Structure.\n'
    '2. Print Course List.\n'
    '3. Print Course.\n'
    '9. Exit'
)
NOT_LOADED_MESSAGE = 'Please load data first (Option 1).'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

LEADING_NUMBER = re.compile(r'[+-]?\d+')


def parse_choice(text: str) -> int | None:
    """Leading integer of a menu answer (`01` and `3x` both pick a number), else None."""
    match = LEADING_NUMBER.match(text.strip())
    return int(match.group()) if match else None


def load_option(store: CatalogStore, prompt: Callable[[str], str]) -> None:
    file_name = prompt('Enter the file name to load (e.g., courses.txt): ').strip()
    if not file_name:
        print('No file name entered.')
        return
    try:
        result = store.load(file_name)
    except CatalogLoadError:
        # already reported on the diagnostics channel
        return
    print(result.summary)


def list_option(store: CatalogStore) -> None:
    lines = render_course_list(store)
    print('Here is a sample schedule:')
    for line in lines:
        print(line)


def detail_option(store: CatalogStore, prompt: Callable[[str], str]) -> None:
    if not store.is_loaded:
        raise CatalogNotLoadedError()
    identifier = prompt('What course do you want to know about? ')
    for line in render_course_detail(store, identifier):
        print(line)


def run_menu(store: CatalogStore, prompt: Callable[[str], str] | None = None) -> None:
    """
    Numbered menu loop over a catalog store.

    Exits on option 9 or end of input. Query failures print their message
    and return to the menu.
    """
    prompt = prompt or input
    while True:
        print(MENU)
        try:
            answer = prompt('What would you like to do? ').strip()
        except EOFError:
            break
        if not answer:
            continue
        choice = parse_choice(answer)
        if choice is None:
            print(f'{answer} is not a valid option.')
            continue

        try:
            if choice == 1:
                load_option(store, prompt)
            elif choice == 2:
                list_option(store)
            elif choice == 3:
                detail_option(store, prompt)
            elif choice == 9:
                print('Thank you for using the course planner!')
                break
            else:
                print(f'{choice} is not a valid option.')
        except CatalogNotLoadedError:
            print(NOT_LOADED_MESSAGE)
        except CatalogQueryError as e:
            print(e)
        except EOFError:
            break


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Course catalog planner with prerequisite lookup.')
    parser.add_argument(
        '--catalog', help='Catalog file to load before the menu starts (IDENTIFIER,TITLE[,PREREQ...]).'
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level.upper(),
        help='Diagnostics verbosity on stderr (default: COURSE_PLANNER_LOG_LEVEL or INFO).',
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        default=settings.strict_prerequisites,
        help='Reject lines with empty prerequisite fields instead of dropping the fields.',
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    store = CatalogStore(strict=args.strict)

    if args.catalog:
        try:
            print(store.load(args.catalog).summary)
        except CatalogLoadError:
            # reported on stderr; the menu still starts with an empty store
            pass

    run_menu(store)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
