from __future__ import annotations
import streamlit as st
import re
import logging
import pandas as pd
import numpy as np
from typing import Dict, List
import matplotlib.pyplot as plt
import networkx as nx
import io

from textrank_keyword import (
    TextRankConfig, TextRankKeyword, CooccurrenceGraph, tokenize,
    filter_words, build_cooccurrence_graph, rank_vertices_with_stats, top_k,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

def extract_rtf_text(rtf_content):
    """Extract plain text from RTF content."""
    text = re.sub(r'\\[a-z]+\d*', '', rtf_content)
    text = re.sub(r'[{}]', '', text)
    text = re.sub(r'\\\*.*?;', '', text)
    text = re.sub(r'\\[^a-z]', '', text)
    text = re.sub(r'\s+', ' ', text)
    return text.strip()

def extract_markdown_text(md_content):
    """Extract plain text from Markdown content."""
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'_{1,2}(.*?)_{1,2}', r'\1', text)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    text = re.sub(r'^-{3,}$', '', text, flags=re.MULTILINE)
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()

def load_text_from_file(uploaded_file):
    """Load text content from uploaded file based on file type."""
    file_extension = uploaded_file.name.lower().split('.')[-1]
    content = uploaded_file.read().decode("utf-8")

    if file_extension == 'rtf':
        return extract_rtf_text(content)
    elif file_extension == 'md':
        return extract_markdown_text(content)
    else:
        return content

def draw_keyword_graph(graph: CooccurrenceGraph, scores: Dict[str, float], keywords: List[str], max_nodes: int = 60):
    """Draw the co-occurrence graph; node size follows score, top keywords in yellow."""
    shown = [w for w, _ in top_k(scores, max_nodes)]
    G = nx.Graph()
    G.add_nodes_from(shown)
    keep = set(shown)
    for a, b in graph.edges():
        if a in keep and b in keep:
            G.add_edge(a, b)

    fig, ax = plt.subplots(figsize=(12, 9))
    ax.set_title("Word Co-occurrence Graph", fontsize=14, fontweight='bold')

    if len(G.nodes) > 0:
        pos = nx.spring_layout(G, k=0.8, iterations=50, seed=42)
        top = max(scores[w] for w in G.nodes) or 1.0
        sizes = [300 + 1500 * (scores[w] / top) for w in G.nodes]
        kw = set(keywords)
        colors = ['yellow' if w in kw else 'lightblue' for w in G.nodes]

        nx.draw_networkx_edges(G, pos, ax=ax, width=1, alpha=0.3, edge_color='gray')
        nx.draw_networkx_nodes(G, pos, ax=ax, node_color=colors, node_size=sizes, alpha=0.8)
        nx.draw_networkx_labels(G, pos, ax=ax, font_size=9)

    ax.axis('off')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close()

    return buf

def create_sidebar_controls():
    """Create sidebar controls for parameters."""
    st.sidebar.header("Parameters")
    count = st.sidebar.slider("Keywords", min_value=1, max_value=50, value=10, step=1)
    window = st.sidebar.slider(
        "Window size", min_value=2, max_value=10, value=5, step=1,
        help="Words within this span of the filtered token stream are linked"
    )
    damping = st.sidebar.slider("Damping factor", min_value=0.05, max_value=1.0, value=0.85, step=0.05)
    max_iter = st.sidebar.number_input("Max iterations", min_value=1, max_value=1000, value=200, step=10)

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=True, help="Show detailed pipeline steps")

    cfg = TextRankConfig(damping_factor=damping, max_iterations=int(max_iter), window_size=window)
    return count, cfg, debug_mode

def debug_pipeline(text: str, count: int, cfg: TextRankConfig) -> List[str]:
    """Run the pipeline step by step and show the intermediate results."""

    st.header("Step 1: Tokenization")
    with st.expander("Tokenization Details", expanded=False):
        terms = tokenize(text)
        words = filter_words(terms, cfg.candidate_filter)
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Tokens", len(terms))
        with col2:
            st.metric("Candidates", len(words))
        with col3:
            st.metric("Distinct Candidates", len(set(words)))
        tag_counts = pd.Series([t.tag for t in terms]).value_counts().rename_axis("Tag").reset_index(name="Count")
        st.dataframe(tag_counts, use_container_width=True)

    st.header("Step 2: Graph Construction")
    with st.expander("Graph Details", expanded=True):
        graph = build_cooccurrence_graph(terms, cfg.candidate_filter, window_size=cfg.window_size)
        n = len(graph)
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Vertices", n)
        with col2:
            st.metric("Edges", graph.edge_count)
        with col3:
            max_possible_edges = n * (n - 1) // 2
            density = graph.edge_count / max_possible_edges if max_possible_edges > 0 else 0
            st.metric("Graph Density", f"{density:.2%}")

        degree_df = pd.DataFrame(
            [{"Word": w, "Degree": graph.degree(w), "Neighbours": ", ".join(sorted(graph.neighbors(w))[:10])}
             for w in graph.vertices]
        )
        if not degree_df.empty:
            st.dataframe(degree_df.sort_values("Degree", ascending=False), use_container_width=True, height=250)

    st.header("Step 3: Rank Propagation")
    with st.expander("Ranking Details", expanded=True):
        result = rank_vertices_with_stats(graph, cfg)
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Iterations", result.iterations)
        with col2:
            st.metric("Converged", "yes" if result.converged else "no")

        values = np.array(list(result.scores.values())) if result.scores else np.zeros(1)
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Min Score", f"{values.min():.3f}")
        with col2:
            st.metric("Max Score", f"{values.max():.3f}")
        with col3:
            st.metric("Mean Score", f"{np.mean(values):.3f}")
        with col4:
            st.metric("Std Score", f"{np.std(values):.3f}")

    st.header("Step 4: Top-K Selection")
    ranked = top_k(result.scores, count)
    keywords = [w for w, _ in ranked]
    with st.expander("Selection Details", expanded=True):
        st.dataframe(pd.DataFrame(ranked, columns=["Keyword", "Score"]), use_container_width=True)

        if 0 < len(graph) <= 300:
            try:
                graph_image = draw_keyword_graph(graph, result.scores, keywords)
                st.image(graph_image, caption="Co-occurrence graph (top keywords highlighted)", use_container_width=True)
            except Exception as e:
                st.error(f"Could not generate graph visualization: {str(e)}")
        else:
            st.info(f"Graph has {len(graph)} vertices; visualization skipped.")

    return keywords

def main():
    st.title("TextRank Keyword Extractor")
    st.write("Upload or paste a document to extract its keywords with TextRank")

    count, cfg, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt', 'rtf', 'md'],
        help="Supports .txt, .rtf, .md formats"
    )
    if uploaded_file is not None:
        text = load_text_from_file(uploaded_file)
        st.text_area("Content", text, height=200, disabled=True)
    else:
        text = st.text_area("Or paste text", "", height=200)

    if text and st.button("Extract Keywords", type="primary"):
        try:
            if debug_mode:
                st.markdown("---")
                keywords = debug_pipeline(text, count, cfg)
            else:
                with st.spinner("Ranking words..."):
                    ranked = TextRankKeyword(keyword_count=count, config=cfg).rank_top(text)
                keywords = list(ranked)
                st.dataframe(pd.DataFrame(list(ranked.items()), columns=["Keyword", "Score"]),
                             use_container_width=True)

            st.markdown("---")
            st.header("Keywords")
            st.write(", ".join(keywords) if keywords else "No candidate words found.")
        except Exception as e:
            st.error(f"Error extracting keywords: {str(e)}")
            st.exception(e)

if __name__ == "__main__":
    main()
