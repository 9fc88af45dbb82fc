class CapacityExceededError(Exception):
    """
    Lançada por OrderedTree.insert quando a árvore já atingiu MAX_SIZE.
    Nenhuma alteração é feita na árvore antes do erro.
    """
    def __init__(self, max_size: int, message: str = None):
        self.max_size = max_size
        if message is None:
            message = f"Too many nodes! Maximum allowed is {max_size}"
        super().__init__(message)
