"""
Shared in-memory state for RAG features.

Holds the vector store built by the most recent upload so the upload and
ask endpoints see the same data. Each successful upload replaces it
wholesale; nothing is persisted across restarts.
"""

# Using a simple dict as a lightweight in-memory store.
global_state = {
    "vector_store": None,
    "filename": None,
}


def get_state() -> dict:
    return global_state


def reset_state() -> None:
    global_state["vector_store"] = None
    global_state["filename"] = None
