from collections import defaultdict


class Leaf:     # pylint: disable=too-few-public-methods,missing-class-docstring
    def __init__(self):
        self.payloads = []
        self.children = defaultdict(Leaf)


class Trie:
    """
    `Trie <https://en.wikipedia.org/wiki/Trie>`_ is a data structure for effective prefix search. It
    is used to store all word forms of the dictionary, with base forms as payloads. For example, if we
    have forms "krasc", "krasca", "krslem", they are stored this way:

    .. code-block:: text

        root
        +-kr
          +-asc     ... base form "krasc"
          | +-a     ... base form "krasc"
          +-slem    ... base form "krasc"

    So, for any string, we can receive payloads of all its stored prefixes in one pass through trie.
    """
    def __init__(self):
        self.root = Leaf()

    def put(self, path, payload):
        cur = self.root
        for p in path:
            cur = cur.children[p]

        cur.payloads.append(payload)

    def get(self, path):
        cur = self.root
        for p in path:
            if p not in cur.children:
                return []
            cur = cur.children[p]
        return cur.payloads

    def lookup(self, path):
        for _, leaf in self.traverse(self.root, path):
            for payload in leaf.payloads:
                yield payload

    def traverse(self, cur, path, traversed=''):
        yield (traversed, cur)
        if not path or path[0] not in cur.children:
            return
        for p, leaf in self.traverse(cur.children[path[0]], path[1:], traversed + path[0]):
            yield (p, leaf)

    def items(self, cur=None, traversed=''):
        """
        All stored paths with their payloads, in lexicographic order of paths.
        """
        if cur is None:
            cur = self.root
        if cur.payloads:
            yield (traversed, cur.payloads)
        for key in sorted(cur.children):
            yield from self.items(cur.children[key], traversed + key)
