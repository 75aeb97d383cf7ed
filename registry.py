# registry.py

from instance import Instance


class InstanceRegistry:
    """Arena of instances, deduplicated by syntactic node identity."""

    def __init__(self):
        self._instances = []
        self._by_node = {}

    def get_or_create(self, node):
        idx = self._by_node.get(node)
        if idx is not None:
            return self._instances[idx]
        inst = Instance(len(self._instances), node)
        self._instances.append(inst)
        self._by_node[node] = inst.index
        return inst

    def lookup(self, node):
        idx = self._by_node.get(node)
        return None if idx is None else self._instances[idx]

    def resolve(self, indices):
        return [self._instances[i] for i in indices]

    def __getitem__(self, index):
        return self._instances[index]

    def __len__(self):
        return len(self._instances)

    def __iter__(self):
        return iter(self._instances)
