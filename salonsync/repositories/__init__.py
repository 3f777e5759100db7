"""
Repositories - persistence backends (Firestore, in-memory)
"""
