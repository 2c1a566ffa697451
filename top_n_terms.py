# top_n_terms.py
import pandas as pd
from pathlib import Path
import sys

N = int(sys.argv[1]) if len(sys.argv) > 1 else 25
table = sys.argv[2] if len(sys.argv) > 2 else "top_tokens"
path = Path(f"data/results/corpus_{table}.csv")
df = pd.read_csv(path, keep_default_na=False)

df = df.sort_values("count", ascending=False, kind="stable")
print(df.head(N).to_string(index=False))
