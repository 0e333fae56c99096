CODER_SYSTEM = (
    "You are a helpful assistant that ONLY returns valid, self-contained Go code. "
    "Do not include explanations or markdown formatting."
)

# Cut the reply short if the model opens a code fence or an HTML comment anyway.
STOP_SEQUENCES: tuple[str, ...] = ("```", "<!--")
