"""Command handlers for source mover."""

from .labels_handler import LabelsHandler
from .pull_handler import PullHandler
from .pulls_handler import PullsHandler

# Table-driven dispatch
COMMAND_HANDLERS = {
    'pulls': PullsHandler,
    'pull': PullHandler,
    'labels': LabelsHandler,
}

__all__ = [
    'COMMAND_HANDLERS',
    'LabelsHandler',
    'PullHandler',
    'PullsHandler',
]
