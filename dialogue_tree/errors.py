"""
Exceptions raised by the dialogue core
"""


class DialogueError(Exception):
    """Base class for dialogue errors"""


class UnknownNodeError(DialogueError, KeyError):
    """A node id that is not a key of the dialogue graph (dangling reference)"""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(node_id)

    def __str__(self) -> str:
        return f"Unknown node '{self.node_id}' (dangling reference)"


class InvalidChoiceError(DialogueError, ValueError):
    """A choice that does not match any option of the current node"""

    def __init__(self, node_id: str, choice):
        self.node_id = node_id
        self.choice = choice
        super().__init__(f"No option {choice!r} at node '{node_id}'")


class GuideValidationError(DialogueError):
    """A guide document whose frontmatter does not match the guide schema"""

    def __init__(self, slug: str, issues):
        self.slug = slug
        self.issues = list(issues)
        details = "; ".join(f"{issue.field}: {issue.message}" for issue in self.issues)
        super().__init__(f"Invalid guide '{slug}': {details}")
