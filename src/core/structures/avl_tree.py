from typing import Optional
from src.core.models.node import TreeNode
from src.core.structures.tree import OrderedTree

class AVLTree(OrderedTree):
    """
    Árvore AVL com chaves inteiras únicas.
    Mantém |altura(esq) - altura(dir)| <= 1 em todo nó através de rotações,
    garantindo inserção, remoção e busca em O(log n).
    """

    def _insert_node(self, current: TreeNode, key: int):
        """Insere e rebalanceia; a raiz pode mudar após as rotações."""
        self.root = self._insert_recursive(current, key)

    def _insert_recursive(self, node: Optional[TreeNode], key: int) -> TreeNode:
        # 1. Inserção normal de BST
        if node is None:
            return TreeNode(key)

        if key < node.key:
            node.left = self._insert_recursive(node.left, key)
        else:
            node.right = self._insert_recursive(node.right, key)

        # 2. Atualizar altura e rebalancear na volta da recursão
        self._update_height(node)
        return self._balance(node)

    def delete(self, key: int) -> bool:
        """Remove a chave se existir, rebalanceando todos os ancestrais."""
        if not self.contains(key):
            return False
        self.root = self._delete_recursive(self.root, key)
        self.size -= 1
        return True

    def _delete_recursive(self, node: Optional[TreeNode], key: int) -> Optional[TreeNode]:
        if node is None:
            return None

        if key < node.key:
            node.left = self._delete_recursive(node.left, key)
        elif key > node.key:
            node.right = self._delete_recursive(node.right, key)
        else:
            # Nenhum ou um filho
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left

            # Dois filhos: copia a chave do sucessor in-order e remove o original
            successor = self.in_order_successor(node)
            node.key = successor.key
            node.right = self._delete_recursive(node.right, successor.key)

        self._update_height(node)
        return self._balance(node)

    # --- Métodos Auxiliares e Rotações ---

    def _balance(self, node: TreeNode) -> TreeNode:
        balance = self.balance_factor(node)

        # Pesado à esquerda
        if balance > 1:
            if self.balance_factor(node.left) < 0:
                node.left = self._rotate_left(node.left)  # Caso Left-Right
            return self._rotate_right(node)               # Caso Left-Left

        # Pesado à direita
        if balance < -1:
            if self.balance_factor(node.right) > 0:
                node.right = self._rotate_right(node.right)  # Caso Right-Left
            return self._rotate_left(node)                   # Caso Right-Right

        return node

    def _get_height(self, node: Optional[TreeNode]) -> int:
        if node is None:
            return -1
        return node.height

    def _update_height(self, node: TreeNode):
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def balance_factor(self, node: Optional[TreeNode]) -> int:
        """altura(esquerda) - altura(direita); 0 para nó ausente."""
        if node is None:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _rotate_left(self, z: TreeNode) -> TreeNode:
        """
        Rotação simples à esquerda.
        Usada quando o peso está na direita (Right-Right).
        """
        y = z.right
        T2 = y.left

        # Rotação
        y.left = z
        z.right = T2

        # Atualiza alturas (filho antes do pai)
        self._update_height(z)
        self._update_height(y)

        return y

    def _rotate_right(self, z: TreeNode) -> TreeNode:
        """
        Rotação simples à direita.
        Usada quando o peso está na esquerda (Left-Left).
        """
        y = z.left
        T3 = y.right

        y.right = z
        z.left = T3

        self._update_height(z)
        self._update_height(y)

        return y
