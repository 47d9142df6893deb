from dblang.db.models.core import CultureRecord, FormItem, Message

__all__ = ["CultureRecord", "FormItem", "Message"]
