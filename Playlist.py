from Episode import Episode

import logging
import numpy as np


class EmptyCollectionError(Exception):
    """Exception raised when removing from or sorting an empty playlist."""

    pass


class NotFoundError(Exception):
    """Exception raised when no episode in the playlist has the requested title."""

    pass


class Playlist:
    """
    A playlist of episodes implemented as a doubly-linked list.

    Every episode links to both the next and the previous episode so the
    playlist can be walked forward from the head or backward from the tail.
    Only the head is stored; the tail is found by walking forward.

    Attributes:
        size (int): Number of episodes in the playlist.
        headNode (Episode): First episode in the playlist.
        logger (logging.Logger): Logger for mutation and error output.
    """
    def __init__(
        self,
        episodes=(),
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Initialize a new playlist.

        Args:
            episodes (iterable, optional): (title, duration) pairs to append in order. Defaults to ().
            logFile (str, optional): Path to log file. Defaults to None.
            logLevel (int, optional): Logging level. Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger. If None, creates new one. Defaults to None.
        """
        if logger is None:
            self.logger = logging.getLogger("PLAYLIST")
            self.logger.setLevel(logLevel)

            if logFile is not None:
                file_handler = logging.FileHandler(logFile)
                file_handler.setLevel(logLevel)

                formatter = logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
                file_handler.setFormatter(formatter)

                self.logger.addHandler(file_handler)
        else:
            self.logger = logger

        self.headNode = None
        self.size = 0

        for title, duration in episodes:
            self.append(title, duration)

    def isEmpty(self):
        """
        Returns:
            bool: True if the playlist contains no episodes.
        """
        return self.headNode is None

    def _raiseIfEmpty(self, operation):
        if self.isEmpty():
            message = f"Cannot {operation} an empty playlist."
            self.logger.error(message)
            raise EmptyCollectionError(message)

    def _lastNode(self):
        nodei = self.headNode
        if nodei is None:
            return None
        while nodei.nextNode is not None:
            nodei = nodei.nextNode
        return nodei

    # ---- Insertion / Removal ----

    def prepend(self, title, duration):
        """
        Add a new episode to the beginning of the playlist.

        Args:
            title (str): The episode title.
            duration (float): The episode length.

        Returns:
            Episode: The newly inserted episode.
        """
        newNode = Episode(title, duration, nextNode=self.headNode)

        if self.headNode is not None:
            self.headNode.prevNode = newNode
        self.headNode = newNode

        self.size += 1
        self.logger.debug("Prepended \"%s\" (size %s)", title, self.size)
        return newNode

    def append(self, title, duration):
        """
        Add a new episode to the end of the playlist.

        The tail is found by walking forward from the head, so this is O(n).

        Args:
            title (str): The episode title.
            duration (float): The episode length.

        Returns:
            Episode: The newly inserted episode.
        """
        lastNode = self._lastNode()
        newNode = Episode(title, duration, prevNode=lastNode)

        if lastNode is None:
            self.headNode = newNode
        else:
            lastNode.nextNode = newNode

        self.size += 1
        self.logger.debug("Appended \"%s\" (size %s)", title, self.size)
        return newNode

    def removeFirst(self):
        """
        Remove and return the first episode in the playlist.

        Returns:
            Episode: The detached episode (its links are cleared).

        Raises:
            EmptyCollectionError: If the playlist is empty.
        """
        self._raiseIfEmpty("remove the first episode of")

        first = self.headNode
        self.headNode = first.nextNode
        if self.headNode is not None:
            self.headNode.prevNode = None

        self.size -= 1
        first.unlink()
        self.logger.debug("Removed first episode \"%s\" (size %s)", first.title, self.size)
        return first

    def removeLast(self):
        """
        Remove and return the last episode in the playlist.

        Returns:
            Episode: The detached episode (its links are cleared).

        Raises:
            EmptyCollectionError: If the playlist is empty.
        """
        self._raiseIfEmpty("remove the last episode of")

        if self.headNode.nextNode is None:
            last = self.headNode
            self.headNode = None
        else:
            last = self._lastNode()
            last.prevNode.nextNode = None

        self.size -= 1
        last.unlink()
        self.logger.debug("Removed last episode \"%s\" (size %s)", last.title, self.size)
        return last

    def removeEpisode(self, title):
        """
        Remove and return the first episode (in forward order) with the given title.

        Args:
            title (str): The title to search for. Compared case-sensitively.

        Returns:
            Episode: The detached episode (its links are cleared).

        Raises:
            EmptyCollectionError: If the playlist is empty.
            NotFoundError: If no episode has the given title.
        """
        self._raiseIfEmpty("remove an episode from")

        prevNode = None
        nodei = self.headNode
        while nodei is not None and nodei.title != title:
            prevNode = nodei
            nodei = nodei.nextNode

        if nodei is None:
            message = f"No episode titled \"{title}\" in the playlist."
            self.logger.error(message)
            raise NotFoundError(message)

        nextNode = nodei.nextNode
        if prevNode is None:
            self.headNode = nextNode
        else:
            prevNode.nextNode = nextNode
        if nextNode is not None:
            nextNode.prevNode = prevNode

        self.size -= 1
        nodei.unlink()
        self.logger.debug("Removed episode \"%s\" (size %s)", title, self.size)
        return nodei

    # ---- Sorting (MergeSort by title) ----

    def merge(self, a, b):
        """
        Merge two sorted chains of episodes into one sorted chain.

        On equal titles the episode from "a" comes first, which keeps the sort stable.

        Args:
            a (Episode): Head of the left sorted chain, or None.
            b (Episode): Head of the right sorted chain, or None.

        Returns:
            Episode: Head of the merged chain. Its prevNode is None.
        """
        if a is None:
            return b
        if b is None:
            return a

        if a.title <= b.title:
            head = a
            a = a.nextNode
        else:
            head = b
            b = b.nextNode
        head.prevNode = None

        current = head
        while a is not None and b is not None:
            if a.title <= b.title:
                current.nextNode = a
                a.prevNode = current
                a = a.nextNode
            else:
                current.nextNode = b
                b.prevNode = current
                b = b.nextNode
            current = current.nextNode

        # Whatever is left over is already sorted and linked internally.
        rest = a if a is not None else b
        current.nextNode = rest
        if rest is not None:
            rest.prevNode = current

        return head

    def getMiddleEpisode(self, node):
        """
        Find the middle episode of the chain starting at "node".

        Uses a slow/fast walk. For an odd number of episodes the middle lands
        so that the left half is the longer one (5 episodes split 3/2).

        Args:
            node (Episode): Head of the chain.

        Returns:
            Episode: The last episode of the left half, or None if "node" is None.
        """
        if node is None:
            return node
        slow = node
        fast = node
        while fast.nextNode is not None and fast.nextNode.nextNode is not None:
            slow = slow.nextNode
            fast = fast.nextNode.nextNode
        return slow

    def sort(self, node):
        """
        Recursively sort the chain starting at "node".

        Args:
            node (Episode): Head of the chain to sort.

        Returns:
            Episode: Head of the sorted chain.
        """
        if node is None or node.nextNode is None:
            return node

        middle = self.getMiddleEpisode(node)
        leftHead = node
        rightHead = middle.nextNode

        # Split the chain into two halves
        if rightHead is not None:
            rightHead.prevNode = None
        middle.nextNode = None

        left = self.sort(leftHead)
        right = self.sort(rightHead)
        return self.merge(left, right)

    def mergeSort(self):
        """
        Sort the playlist in place by title (ascending, case-sensitive).

        The sort is stable and works by re-linking the existing episodes.

        Raises:
            EmptyCollectionError: If the playlist is empty.
        """
        self._raiseIfEmpty("sort")

        self.logger.debug("Sorting %s episodes...", self.size)
        self.headNode = self.sort(self.headNode)
        self.logger.debug("Finished sorting %s episodes.", self.size)

    # ---- Traversal / Rendering ----

    def __iter__(self):
        nodei = self.headNode
        while nodei is not None:
            yield nodei
            nodei = nodei.nextNode

    def __reversed__(self):
        nodei = self._lastNode()
        while nodei is not None:
            yield nodei
            nodei = nodei.prevNode

    def __len__(self):
        return self.size

    def render(self):
        """
        Describe the playlist forward, from the head to the last episode.

        Yields:
            str: "[HEAD]", then "<title>, <duration>" for each episode, then "[END]".
        """
        yield "[HEAD]"
        for episode in self:
            yield str(episode)
        yield "[END]"

    def renderReverse(self):
        """
        Describe the playlist backward, from the last episode to the head,
        following the prevNode references.

        Yields:
            str: "[END]", then "<title>, <duration>" for each episode, then "[HEAD]".
        """
        yield "[END]"
        for episode in reversed(self):
            yield str(episode)
        yield "[HEAD]"

    def ToString(self):
        items = list(self.render())
        return f"{items[0]} {' -> '.join(items[1:-1])} {items[-1]}"

    def ToReverseString(self):
        items = list(self.renderReverse())
        return f"{items[0]} {' -> '.join(items[1:-1])} {items[-1]}"

    def __str__(self):
        return self.ToString()

    def titles(self):
        return [episode.title for episode in self]

    def Durations(self):
        """
        Returns:
            np.array: The episode durations in playlist order.
        """
        return np.array([episode.duration for episode in self], dtype=float)

    def TotalDuration(self):
        return float(np.sum(self.Durations()))
