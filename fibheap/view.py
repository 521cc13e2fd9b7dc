def heap_view(heap):
    """
    Render the forest of a heap as a ``treelib.Tree``.

    Every root hangs below a synthetic ``heap`` node. Tags are the keys,
    marked nodes carry a trailing ``*``.
    """
    from treelib import Tree

    ret = Tree()
    ret.create_node('heap', 'root')
    stack = [(node, 'root') for node in heap.roots()]
    while stack:
        node, parent = stack.pop()
        tag = f'{node.key}*' if node.marked else f'{node.key}'
        ret.create_node(tag, id(node), parent=parent)
        stack.extend((child, id(node)) for child in node.children())
    return ret
