"""payforblob tests package.

Houses unit and property tests for:
- subtree sizing and Merkle aggregation
- namespaces, the namespaced hasher and tree
- share splitting and share commitments
- blob / message validation, addresses and message encoding
"""
