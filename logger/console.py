from rich.console import Console

# Diagnostics only; the step trace goes to stdout untouched.
console = Console(stderr=True)

def report_error(message):
    console.print(f"ERROR: {message}", style="red", markup=False, highlight=False, emoji=False, soft_wrap=True)

def report_usage(text):
    console.print(text.rstrip(), markup=False, highlight=False, soft_wrap=True)
