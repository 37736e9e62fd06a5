"""
Interactive Dialogue Player - Walk through the adventure and make choices in real-time!
"""

import shutil
import textwrap

from dialogue_tree.errors import InvalidChoiceError
from dialogue_tree.session import DialogueSession
from dialogue_tree.state.store import TraversalSnapshot


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    ITALIC = "\033[3m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"

    BRIGHT_BLACK = "\033[90m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"
    BRIGHT_WHITE = "\033[97m"


QUIT_COMMANDS = ("quit", "exit", "q")
RESTART_COMMANDS = ("restart", "r")


class DialoguePlayer:
    """Interactive dialogue player"""

    def __init__(self, session: DialogueSession = None, verbose: bool = False):
        self.session = session if session is not None else DialogueSession()
        self.verbose = verbose
        self.needs_render = True
        self.running = False
        self.term_width = shutil.get_terminal_size(fallback=(80, 24)).columns
        self._unsubscribe = self.session.state.subscribe(self._on_state_change)

    def _on_state_change(self, snapshot: TraversalSnapshot):
        """Redraw on the next loop iteration whenever the state moves"""
        self.needs_render = True
        if self.verbose:
            trail = " → ".join(list(snapshot.history) + [snapshot.current_node])
            print(f"{Colors.DIM}[{trail}]{Colors.RESET}")

    def format_dialogue_box(self, text: str, speaker: str, color: str, max_width: int = 60) -> str:
        """Format dialogue text in a nice box"""
        actual_max = max(20, min(max_width, self.term_width - 8))
        lines = textwrap.wrap(text, width=actual_max) or [""]

        box_width = max(max(len(line) for line in lines), len(speaker) + 2)

        result = [f"\n  {color}╭─ {speaker} {'─' * (box_width - len(speaker) - 1)}╮{Colors.RESET}"]
        for line in lines:
            result.append(f"  {color}│{Colors.RESET} {line.ljust(box_width)} {color}│{Colors.RESET}")
        result.append(f"  {color}╰{'─' * (box_width + 2)}╯{Colors.RESET}")
        return "\n".join(result)

    def play(self):
        """Start playing the dialogue"""
        print(f"\n{Colors.BRIGHT_CYAN}{'=' * 70}{Colors.RESET}")
        print(f"{Colors.BRIGHT_YELLOW}{Colors.BOLD}🎭 INTERACTIVE DIALOGUE PLAYER{Colors.RESET}")
        print(f"{Colors.BRIGHT_CYAN}{'=' * 70}{Colors.RESET}")
        print(f"\n{Colors.BRIGHT_WHITE}Controls:{Colors.RESET}")
        print(f"  {Colors.CYAN}•{Colors.RESET} Enter the number to select a choice")
        print(f"  {Colors.CYAN}•{Colors.RESET} Type {Colors.YELLOW}'history'{Colors.RESET} to see the path so far")
        print(f"  {Colors.CYAN}•{Colors.RESET} Type {Colors.YELLOW}'restart'{Colors.RESET} to start over")
        print(f"  {Colors.CYAN}•{Colors.RESET} Type {Colors.YELLOW}'quit'{Colors.RESET} to stop")

        self.running = True
        try:
            while self.running:
                if self.needs_render:
                    self.needs_render = False
                    self.show_node()

                if self.session.is_finished():
                    self.prompt_ending()
                else:
                    self.prompt_choice()
        finally:
            self._unsubscribe()

        self.show_history()

    def show_node(self):
        node = self.session.node
        print(self.format_dialogue_box(node.text, "Narrator", Colors.BRIGHT_CYAN))

        if node.is_terminal():
            return

        print(f"\n{Colors.DIM}{'─' * 50}{Colors.RESET}")
        for i, option in enumerate(node.options, 1):
            prefix = f"  {Colors.BRIGHT_YELLOW}[{i}]{Colors.RESET}"
            print(f"{prefix} {Colors.YELLOW}{option.text}{Colors.RESET}")

    def _read(self) -> str:
        try:
            return input(f"\n{Colors.BRIGHT_MAGENTA}>{Colors.RESET} ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            return "quit"

    def prompt_choice(self):
        """Read one command or choice number from the player"""
        user_input = self._read()

        if user_input in QUIT_COMMANDS:
            print(f"\n{Colors.BRIGHT_YELLOW}👋 Thanks for playing!{Colors.RESET}")
            self.running = False
            return

        if user_input in RESTART_COMMANDS:
            self.session.restart()
            return

        if user_input == "history":
            self.show_history()
            return

        try:
            choice_num = int(user_input)
        except ValueError:
            print(f"{Colors.RED}❌ Please enter a valid number or command.{Colors.RESET}")
            return

        try:
            option = self.session.choose(choice_num)
        except InvalidChoiceError:
            print(f"{Colors.RED}❌ Invalid choice. Please enter a number from the list.{Colors.RESET}")
            return

        if option is not None:
            print(self.format_dialogue_box(option.text, "You", Colors.BRIGHT_GREEN))

    def prompt_ending(self):
        """Offer a restart once a terminal node is reached"""
        print(f"\n{Colors.BRIGHT_CYAN}{'=' * 70}{Colors.RESET}")
        print(f"{Colors.BRIGHT_YELLOW}{Colors.BOLD}🎬 THE END{Colors.RESET}")
        print(f"{Colors.BRIGHT_CYAN}{'=' * 70}{Colors.RESET}")
        print(f"Type {Colors.YELLOW}'restart'{Colors.RESET} to play again, anything else to quit.")

        if self._read() in RESTART_COMMANDS:
            self.session.restart()
        else:
            self.running = False

    def show_history(self):
        """Display the path taken so far"""
        print(f"\n{Colors.BRIGHT_MAGENTA}📍 Path: {' → '.join(self.session.path())}{Colors.RESET}")
        print(f"📝 Steps taken: {len(self.session.state.get_history())}")
