from selectorkit.objects.json_codec import from_json, get_json
from selectorkit.objects.rectangle import Rectangle

__all__ = ["Rectangle", "get_json", "from_json"]
