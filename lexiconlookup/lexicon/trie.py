class TrieNode:
    __slots__ = ['children', 'is_word_end']

    def __init__(self):
        self.children = {}
        self.is_word_end = False

    def insert(self, word: str) -> bool:
        """
        Adds word below this node, one child per letter. Returns True if
        the word was not already present.
        """
        node = self
        for letter in word:
            child = node.children.get(letter)
            if child is None:
                node.children[letter] = child = TrieNode()
            node = child

        added = not node.is_word_end
        node.is_word_end = True
        return added

    def find(self, word: str):
        """
        Walks word from this node; returns the node reached, or None if
        the path breaks off.
        """
        node = self
        for letter in word:
            node = node.children.get(letter)
            if node is None:
                return None
        return node

    def __contains__(self, letter):
        return letter in self.children

    def __repr__(self):
        return f"<TrieNode {''.join(self.children)} ({self.is_word_end})>"
