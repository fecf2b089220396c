# === main.py ===
import logging

from course_planner.catalog import CourseCatalog, load_courses
from course_planner.config import (
    DETAIL_CHOICE,
    EXIT_CHOICE,
    LIST_CHOICE,
    LOAD_CHOICE,
    configure_logging,
    parse_args,
)
from course_planner.printer import print_course_details, print_course_list

logger = logging.getLogger(__name__)

MENU = [
    "",
    f"{LOAD_CHOICE}. Load Data Structure.",
    f"{LIST_CHOICE}. Print Course List.",
    f"{DETAIL_CHOICE}. Print Course.",
    f"{EXIT_CHOICE}. Exit.",
    "",
]
NO_DATA = "No data loaded. Please load the data first."


class CoursePlannerShell:
    def __init__(self, input_func=None, out=None):
        self.input_func = input_func or input
        self.out = out
        self.catalog = CourseCatalog()
        self.running = False

    def say(self, text=""):
        print(text, file=self.out)

    def ask(self, prompt):
        return self.input_func(prompt).strip()

    def read_choice(self):
        raw = self.ask("What would you like to do? ")
        try:
            return int(raw)
        except ValueError:
            return raw

    def load(self, path):
        self.say(f"Attempting to open file: {path}")
        self.catalog = load_courses(path)
        if self.catalog:
            self.say("Data loaded successfully.")
        return self.catalog

    def handle_load(self):
        path = self.ask("Enter the file name to load: ")
        self.load(path)

    def handle_list(self):
        if not self.catalog:
            self.say(NO_DATA)
            return
        print_course_list(self.catalog, out=self.out)

    def handle_detail(self):
        if not self.catalog:
            self.say(NO_DATA)
            return
        code = self.ask("What course do you want to know about? ")
        print_course_details(self.catalog, code, out=self.out)

    def handle_exit(self):
        self.say("Thank you for using the course planner!")
        self.running = False

    def dispatch(self, choice):
        handlers = {
            LOAD_CHOICE: self.handle_load,
            LIST_CHOICE: self.handle_list,
            DETAIL_CHOICE: self.handle_detail,
            EXIT_CHOICE: self.handle_exit,
        }
        handler = handlers.get(choice)
        if handler is None:
            self.say(f"{choice} is not a valid option.")
            return
        handler()

    def run(self):
        self.say("Welcome to the Course Planner.")
        self.running = True
        while self.running:
            for line in MENU:
                self.say(line)
            try:
                self.dispatch(self.read_choice())
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed, leaving the menu loop")
                self.say()
                self.handle_exit()


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)

    shell = CoursePlannerShell()
    if args.file:
        shell.load(args.file)
    shell.run()
    return 0


if __name__ == "__main__":
    main()
