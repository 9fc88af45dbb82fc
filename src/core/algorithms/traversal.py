from typing import Dict, List, Optional
from src.core.models.node import TreeNode

def pre_order(root: Optional[TreeNode]) -> List[TreeNode]:
    """Raiz, esquerda, direita."""
    nodes: List[TreeNode] = []
    _pre_order(root, nodes)
    return nodes

def _pre_order(node: Optional[TreeNode], nodes: List[TreeNode]):
    if node:
        nodes.append(node)
        _pre_order(node.left, nodes)
        _pre_order(node.right, nodes)

def in_order(root: Optional[TreeNode]) -> List[TreeNode]:
    """Esquerda, raiz, direita. Em uma BST a saída fica ordenada por chave."""
    nodes: List[TreeNode] = []
    _in_order(root, nodes)
    return nodes

def _in_order(node: Optional[TreeNode], nodes: List[TreeNode]):
    if node:
        _in_order(node.left, nodes)
        nodes.append(node)
        _in_order(node.right, nodes)

def post_order(root: Optional[TreeNode]) -> List[TreeNode]:
    """Esquerda, direita, raiz."""
    nodes: List[TreeNode] = []
    _post_order(root, nodes)
    return nodes

def _post_order(node: Optional[TreeNode], nodes: List[TreeNode]):
    if node:
        _post_order(node.left, nodes)
        _post_order(node.right, nodes)
        nodes.append(node)

def visit_order(nodes: List[TreeNode]) -> Dict[int, int]:
    """
    Numera os nós na ordem em que foram visitados: {chave: posição}.
    A posição começa em 1, como o rótulo exibido ao lado de cada nó.
    Serve tanto para travessias quanto para o caminho de find_with_path.
    """
    return {node.key: i + 1 for i, node in enumerate(nodes)}

def count_nodes(root: Optional[TreeNode]) -> int:
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)

def is_bst(root: Optional[TreeNode]) -> bool:
    """Verifica a ordenação estrita (sem duplicatas) de toda a árvore."""
    return _is_bst(root, None, None)

def _is_bst(node: Optional[TreeNode], low: Optional[int], high: Optional[int]) -> bool:
    if node is None:
        return True
    if low is not None and node.key <= low:
        return False
    if high is not None and node.key >= high:
        return False
    return _is_bst(node.left, low, node.key) and _is_bst(node.right, node.key, high)

def is_avl(root: Optional[TreeNode]) -> bool:
    """
    Verifica as alturas armazenadas e o fator de balanceamento de cada nó.
    Não verifica a ordenação; combine com is_bst().
    """
    return _checked_height(root) is not None

def _checked_height(node: Optional[TreeNode]) -> Optional[int]:
    # Retorna a altura real da subárvore, ou None se alguma regra falhar
    if node is None:
        return -1
    left = _checked_height(node.left)
    right = _checked_height(node.right)
    if left is None or right is None:
        return None
    if abs(left - right) > 1:
        return None
    height = 1 + max(left, right)
    if node.height != height:
        return None
    return height
