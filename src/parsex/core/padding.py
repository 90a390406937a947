def strip(stream: str) -> str:
    return stream.lstrip()


def pad(token: str, stream: str) -> str:
    if not token:
        return token
    skipped = len(stream) - len(strip(stream))
    return stream[:skipped] + token
