"""Approximate (ordered subsequence) string matching."""


def approximate_match(text: str, query: str) -> float:
    """
    Ratio of query characters found in order within text.

    A single greedy left-to-right pass: every time the current text
    character equals the next unmatched query character, both advance.
    The ratio is only awarded when the whole query was consumed,
    otherwise the result is 0. Comparison is case-sensitive.

    Args:
        text: Candidate text to scan
        query: Pattern whose characters must appear in order

    Returns:
        Match ratio between 0 and 1
    """
    if not text or not query:
        return 0.0

    query_length = len(query)
    if query_length > len(text):
        return 0.0

    matched = 0
    query_index = 0

    for char in text:
        if query_index == query_length:
            break
        if char == query[query_index]:
            matched += 1
            query_index += 1

    if query_index != query_length:
        return 0.0

    return matched / query_length
