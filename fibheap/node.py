class Owner():
    """
    Ownership token shared by every node of one heap.

    Melding forwards the consumed heap's token to the receiving heap's
    token, so the owner of a node is found by following ``link`` to the
    end of the chain.
    """
    __slots__ = ('link', )

    def __init__(self):
        self.link = None

    def resolve(self):
        root = self
        while root.link is not None:
            root = root.link
        node = self
        while node.link is not None and node.link is not root:
            node.link, node = root, node.link
        return root


class HeapNode():
    __slots__ = ('key', 'value', 'rank', 'marked', 'parent', 'child', 'next',
                 'prev', 'owner')

    def __init__(self, key, value=None):
        self.key, self.value = key, value
        self.rank, self.marked = 0, False
        self.parent, self.child = None, None
        self.next, self.prev = self, self
        self.owner = None

    def is_root(self):
        return self.parent is None

    def siblings(self):
        """
        Iterate the circular list this node belongs to, starting here.
        """
        node = self
        while True:
            yield node
            node = node.next
            if node is self:
                break

    def children(self):
        if self.child is not None:
            yield from self.child.siblings()

    def __repr__(self):
        return f'{self.key}'


def link_before(node, anchor):
    """
    Insert ``node`` into the circular list of ``anchor``, right before it.
    """
    node.next = anchor
    node.prev = anchor.prev
    anchor.prev = node
    node.prev.next = node


def connect(left, right):
    left.next = right
    right.prev = left
