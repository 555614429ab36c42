# Consume commits until stop matches. The matching commit is not collected.
# Returns the collected commits and whether stop ever matched.
def walk_until(commits, stop):
    collected = []
    for commit in commits:
        if stop(commit):
            return collected, True
        collected.append(commit)

    return collected, False
