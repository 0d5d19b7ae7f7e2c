"""
Form encoding for request bodies that can't be sent as JSON.

OAuth token endpoints only accept application/x-www-form-urlencoded bodies,
with nested values written as bracketed keys, e.g. client[id]=42.
"""
from urllib.parse import quote_plus


def escape(value):
    return quote_plus(str(value), safe='')


def build_nested_query(params):
    """ Encode a mapping as a nested query string.

    For example, build_nested_query({'user': {'name': 'joe', 'ids': [1, 2]}})
    returns 'user%5Bids%5D%5B%5D=1&user%5Bids%5D%5B%5D=2&user%5Bname%5D=joe'.

    :param params: a dict of values, lists and nested dicts
    :return: the encoded string
    """
    if not hasattr(params, 'items'):
        raise TypeError("Can't convert {} into a query.".format(
            type(params).__name__))
    pairs = []
    for key, value in sorted(params.items(), key=lambda item: str(item[0])):
        pairs.extend(_encode_pair(escape(key), value))
    return '&'.join(pairs)


def _encode_pair(parent, value):
    if hasattr(value, 'items'):
        if not value:
            return ['{}='.format(parent)]
        pairs = []
        for key, child in sorted(value.items(), key=lambda item: str(item[0])):
            pairs.extend(_encode_pair('{}%5B{}%5D'.format(parent, escape(key)),
                                      child))
        return pairs
    if isinstance(value, (list, tuple)):
        new_parent = parent + '%5B%5D'
        if not value:
            return [new_parent]
        pairs = []
        for child in value:
            pairs.extend(_encode_pair(new_parent, child))
        return pairs
    if value is None:
        return [parent]
    if isinstance(value, bool):
        value = 'true' if value else 'false'
    return ['{}={}'.format(parent, escape(value))]
