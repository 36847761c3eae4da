from .note_entry import NoteEntry

__all__ = ["NoteEntry"]
