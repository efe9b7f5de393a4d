"""
Deletion registry — deletion comment records.

Called from ItemStore inside its transactions; never links or unlinks
items by itself.
"""

from depot.models.deletion import Deletion


class DeletionRegistry:
    """Create and remove Deletion rows."""

    @classmethod
    def create(cls, comment: str) -> Deletion:
        return Deletion.objects.create(comment=comment)

    @classmethod
    def remove(cls, deletion_id: int) -> bool:
        """Delete the row. Returns whether it existed."""
        deleted, _ = Deletion.objects.filter(pk=deletion_id).delete()
        return deleted > 0
