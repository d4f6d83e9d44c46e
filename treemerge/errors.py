class TreeMergeError(Exception):
    """Base class of all errors raised by treemerge."""
    pass


class EmptyQueueError(TreeMergeError, IndexError):
    """extract_min or peek on an empty arc queue."""
    pass


class EmptyListError(TreeMergeError, IndexError):
    """remove on an empty partial tree list."""
    pass


class NotFoundError(TreeMergeError, LookupError):
    """No partial tree in the list contains the requested vertex."""
    pass


class InvalidArgument(TreeMergeError, ValueError):
    pass


class GraphParseError(TreeMergeError, ValueError):
    """Graph text that does not follow the graph file format."""

    def __init__(self, msg, lineno=None):
        if lineno is not None:
            msg = f"line {lineno}: {msg}"
        super().__init__(msg)
        self.lineno = lineno
