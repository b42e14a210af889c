from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from fuzzyfind.engine import Engine
from fuzzyfind.config import TOP_K, WORD_LIMIT

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/complete")
def api_complete():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    gen = request.args.get("gen", 0, type=int)
    k = max(1, min(TOP_K, k))
    if _engine is None or not _engine.loaded:
        return jsonify({"error": "word list not loaded"}), 503
    rows = _engine.complete(q, top_k=k) if q else []
    # the client drops any response whose generation is older than its newest request
    return jsonify({"generation": gen, "pattern": q, "results": [r.to_dict() for r in rows]})

@app.get("/health")
def health():
    n = len(_engine.words) if _engine is not None and _engine.words is not None else 0
    return jsonify({"ok": True, "candidates": n})

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny SPA: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Fuzzy Finder</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --hit:#ff5d5d;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:720px; margin:24px auto; padding:0 16px }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px }
h1{ font-size:20px; margin:0 0 8px 0 }
input{
  width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
input:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.row{ display:grid; grid-template-columns:3rem 5rem 1fr; gap:10px; padding:8px 14px; border-top:1px solid var(--border) }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
.hit{ color:var(--hit); font-weight:800 }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Fuzzy Finder</h1>
      <input id="q" type="text" placeholder="Start typing" autocomplete="off" autofocus />
      <div class="meta" id="stats">Ready.</div>
      <div id="out" class="empty">Start typing to see results.</div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), out = $("#out"), stats = $("#stats");

let t;        // debounce timer
let gen = 0;  // newest request issued

function esc(s){ return s.replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
function highlight(text, matches){
  const hits = new Set(matches);
  return Array.from(text).map((ch, i) => hits.has(i) ? `<span class="hit">${esc(ch)}</span>` : esc(ch)).join("");
}

async function search(){
  const mine = ++gen;
  const pattern = q.value;
  try{
    const resp = await fetch(`/api/complete?q=${encodeURIComponent(pattern)}&gen=${mine}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const data = await resp.json();
    if(data.generation !== gen) return;   // superseded while in flight
    const rows = data.results;
    stats.textContent = `Results: ${rows.length}`;
    if(rows.length === 0){
      out.className = "empty";
      out.innerHTML = pattern ? "No matches." : "Start typing to see results.";
      return;
    }
    out.className = "";
    out.innerHTML = rows.map((r, i) => `
      <div class="row">
        <div class="small">${i+1}</div>
        <div class="small">${r.score}</div>
        <div>${highlight(r.text, r.matches)}</div>
      </div>`).join("");
  }catch(e){
    if(mine === gen) stats.textContent = `Error: ${e.message ?? e}`;
  }
}

q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(search, 150); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--words", nargs="+", required=True, help="Word files or folders of .txt files")
    ap.add_argument("--limit", type=int, default=WORD_LIMIT, help="Max words to load (0 = all)")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    _engine.load(args.words, limit=args.limit or None, verbose=args.verbose)
    log.info("Serving %d words on http://%s:%d", len(_engine.words or ()), args.host, args.port)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
