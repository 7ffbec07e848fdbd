from .errors import AmbiguousTarget, TargetNotFound


def select_target(candidates, requested_name=None):
    """Picks the binary to run from the resolved candidates.

    Without a request the choice must be unambiguous: exactly one candidate.
    With a request, the name must be one of the candidates.
    """
    candidates = list(candidates)
    if requested_name is None:
        if len(candidates) == 1:
            return candidates[0]
        raise AmbiguousTarget(candidates)
    if requested_name in candidates:
        return requested_name
    raise TargetNotFound(requested_name, candidates)
