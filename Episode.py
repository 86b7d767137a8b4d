
class Episode:
    """
    A single episode in a playlist, stored as a node of a doubly-linked list.

    The "nextNode" reference owns the rest of the chain toward the tail while
    "prevNode" is only a back-reference to whichever node points at this one.

    Attributes:
        title (str): The episode title. Used as the sort and lookup key.
        duration (float): The episode length.
        nextNode (Episode): Reference to the next episode in the playlist.
        prevNode (Episode): Reference to the previous episode in the playlist.
    """
    def __init__(self,title:str,duration:float,nextNode=None,prevNode=None):
        """
        Initialize a new episode node.

        Args:
            title (str): The episode title.
            duration (float): The episode length.
            nextNode (Episode, optional): The next episode in the list. Defaults to None.
            prevNode (Episode, optional): The previous episode in the list. Defaults to None.
        """
        assert isinstance(title,str), f"Error! An episode title must be a string, not \"{type(title)}\""
        self.title = title
        self.duration = float(duration)

        self.nextNode = nextNode
        self.prevNode = prevNode

    def unlink(self):
        """
        Clear both link fields, e.g. once this episode has been detached from a playlist.
        """
        self.nextNode = None
        self.prevNode = None

    def __str__(self):
        return f"{self.title}, {self.duration}"

    def __repr__(self):
        return f"Episode({self.title!r}, {self.duration})"

    def __eq__(self, other):
        # Two episodes with the same fields are still different nodes.
        return self is other

    def __hash__(self):
        return hash(id(self))
