# common/utils.py
import json

from django.core.exceptions import BadRequest


def parse_json_body(request):
    """Decode a JSON object body; anything else is a 400."""
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (ValueError, UnicodeDecodeError) as e:
        raise BadRequest(f"Malformed JSON body: {e}") from e
    if not isinstance(data, dict):
        raise BadRequest("JSON body must be an object")
    return data
