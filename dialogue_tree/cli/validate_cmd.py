"""
Well-formedness checks for a dialogue graph, with a terminal report.
"""

from dataclasses import dataclass
from typing import List, Optional

from dialogue_tree.content.guides import GuideValidator
from dialogue_tree.graph.graph import DialogueGraph


# ANSI color codes for terminal output
class Colors:
    RED = "\033[91m"
    YELLOW = "\033[93m"
    GREEN = "\033[92m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


@dataclass
class ValidationError:
    """Represents a validation problem located at a node"""

    node_id: str
    severity: str  # 'error' or 'warning'
    message: str
    suggestion: Optional[str] = None


def _string_similarity(s1: str, s2: str) -> float:
    """Calculate simple string similarity ratio"""
    if not s1 or not s2:
        return 0.0
    matches = sum(1 for c1, c2 in zip(s1.lower(), s2.lower()) if c1 == c2)
    return matches / max(len(s1), len(s2))


class GraphValidator:
    """Validator for a dialogue graph.

    Dangling option targets and a missing root are errors. Unreachable nodes
    and a graph with no reachable ending are warnings.
    """

    def __init__(self, graph: DialogueGraph):
        self.graph = graph
        self.errors: List[ValidationError] = []
        self.warnings: List[ValidationError] = []

    def validate(self) -> bool:
        """Main validation method"""
        self.errors = []
        self.warnings = []

        if self.graph.root not in self.graph:
            self._add_error(self.graph.root, f"Root node '{self.graph.root}' is not defined")

        self._validate_references()
        self._validate_flow()

        return len(self.errors) == 0

    def _validate_references(self):
        for node_id, option in self.graph.dangling_references():
            self._add_error(
                node_id,
                f"Option '{option.text}' in node '{node_id}' targets undefined node '{option.next_node}'",
                self._suggest_node(option.next_node),
            )

    def _validate_flow(self):
        """Check reachability from the root and that some ending can be reached"""
        reachable = self.graph.reachable_from(self.graph.root)
        for node_id in self.graph:
            if node_id not in reachable:
                self._add_warning(node_id, f"Node '{node_id}' is unreachable from '{self.graph.root}'")

        if reachable and not (reachable & self.graph.terminal_nodes()):
            self._add_warning(self.graph.root, "No terminal node is reachable - the dialogue can never end")

    def _suggest_node(self, missing: str) -> Optional[str]:
        for node_id in self.graph:
            if _string_similarity(missing, node_id) > 0.7:
                return f"Did you mean '{node_id}'?"
        return None

    def _add_error(self, node_id: str, message: str, suggestion: str = None):
        self.errors.append(ValidationError(node_id, "error", message, suggestion))

    def _add_warning(self, node_id: str, message: str, suggestion: str = None):
        self.warnings.append(ValidationError(node_id, "warning", message, suggestion))

    def report_results(self):
        """Report validation results"""
        print(f"\n{Colors.BOLD}{'=' * 60}{Colors.RESET}")
        print(f"{Colors.BOLD}VALIDATION REPORT: {Colors.CYAN}dialogue graph{Colors.RESET}")
        print(f"{Colors.BOLD}{'=' * 60}{Colors.RESET}")

        if not self.errors and not self.warnings:
            print(f"\n{Colors.GREEN}{Colors.BOLD}✅ VALIDATION PASSED - No issues found!{Colors.RESET}")
            self._print_statistics()
            return

        if self.errors:
            print(f"\n{Colors.RED}{Colors.BOLD}❌ ERRORS ({len(self.errors)}):{Colors.RESET}")
            for error in self.errors:
                self._print_issue(error, Colors.RED)

        if self.warnings:
            print(f"\n{Colors.YELLOW}{Colors.BOLD}⚠️  WARNINGS ({len(self.warnings)}):{Colors.RESET}")
            for warning in self.warnings:
                self._print_issue(warning, Colors.YELLOW)

        print(f"\n{Colors.BOLD}{'=' * 60}{Colors.RESET}")
        if self.errors:
            print(f"{Colors.RED}{Colors.BOLD}❌ VALIDATION FAILED{Colors.RESET}")
        else:
            print(f"{Colors.GREEN}{Colors.BOLD}✅ VALIDATION PASSED WITH WARNINGS{Colors.RESET}")

        self._print_statistics()

    def _print_issue(self, issue: ValidationError, color: str):
        print(f"\n  {color}{Colors.BOLD}[{issue.node_id}]{Colors.RESET} - {issue.message}")
        if issue.suggestion:
            print(f"    {Colors.CYAN}💡 Suggestion:{Colors.RESET} {issue.suggestion}")

    def _print_statistics(self):
        stats = self.graph.stats()
        print(f"\n{Colors.BOLD}{Colors.BLUE}📊 STATISTICS:{Colors.RESET}")
        print(f"  • Nodes: {Colors.CYAN}{stats['nodes']}{Colors.RESET}")
        print(f"  • Options: {Colors.CYAN}{stats['options']}{Colors.RESET}")
        print(f"  • Terminal nodes: {Colors.CYAN}{stats['terminal']}{Colors.RESET}")


def report_guides(validator: GuideValidator):
    """Print the outcome of a guides validation run"""
    print(f"\n{Colors.BOLD}GUIDES: {Colors.CYAN}{validator.directory}{Colors.RESET}")

    for guide in validator.guides:
        print(f"  {Colors.GREEN}✓{Colors.RESET} {guide.slug} - {guide.frontmatter.title}")

    if validator.issues:
        print(f"\n{Colors.RED}{Colors.BOLD}❌ ISSUES ({len(validator.issues)}):{Colors.RESET}")
        for issue in validator.issues:
            print(f"  • {issue.file} [{issue.field}]: {issue.message}")
    else:
        print(f"\n{Colors.GREEN}{Colors.BOLD}✅ All {len(validator.guides)} guide(s) valid{Colors.RESET}")
