"""Canonical example dataset shown to users as a formatting guide"""

EXAMPLE_DATA = "\n".join(
    [
        "2023-01-01\t1,000\t300",
        "2023-01-01\t1,500\t450",
        "2023-01-02\t800\t200",
        "2023-01-15\t1,200\t500",
        "2023-02-01\t2,000\t900",
        "2023-02-03\t650\t700",
        "2023-02-10\t1,750\t600",
    ]
)
