from typing import Optional

class TreeNode:
    """
    Vértice de uma árvore binária de busca.
    Guarda a chave inteira, a altura (usada apenas pela AVL) e os dois filhos.
    Cada nó pertence exclusivamente ao nó pai; não há ponteiro para o pai.
    """
    def __init__(self, key: int):
        self.key = key
        self.height = 0         # Folha tem altura 0 (filho ausente = -1)
        self.left: Optional["TreeNode"] = None
        self.right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def children_count(self) -> int:
        return (self.left is not None) + (self.right is not None)

    def __repr__(self):
        return f"TreeNode(key={self.key}, height={self.height})"
