def scripted(*lines):
    """Reader that answers prompts with the given lines in order."""
    answers = iter(lines)
    return lambda text: next(answers)
