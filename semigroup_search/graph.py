import logging

import networkx as nx
import plotly.graph_objects as go
from pyvis.network import Network

logger = logging.getLogger(__name__)

# Colores por nivel de la búsqueda
COLORS = ['#636EFA', '#EF553B', '#00CC96', '#AB63FA', '#FFA15A', '#19D3F3', '#FF6692']

def search_graph_figure(G, title=None):
    """
    Construye la figura plotly del grafo de una búsqueda con Frobenius fijo.
    Cada nivel de la búsqueda en anchura es una capa; las aristas del árbol
    de descubrimiento se dibujan en rojo y el resto en gris.
    """
    # Posicionamiento de nodos por niveles
    pos = nx.multipartite_layout(G, subset_key="level", align="horizontal")
    pos = {node: (x, -y) for node, (x, y) in pos.items()}  # el nivel 0 arriba

    fig = go.Figure()

    # Dibujamos aristas separando árbol (rojo) y resto (gris)
    x_tree, y_tree, x_rest, y_rest = [], [], [], []
    for u, v, data in G.edges(data=True):
        x0, y0 = pos[u]
        x1, y1 = pos[v]
        if data.get("tree"):
            x_tree.extend([x0, x1, None])
            y_tree.extend([y0, y1, None])
        else:
            x_rest.extend([x0, x1, None])
            y_rest.extend([y0, y1, None])

    fig.add_trace(go.Scatter(x=x_rest, y=y_rest, mode='lines',
                             line=dict(width=1, color='lightgrey'), hoverinfo='none', showlegend=False))
    fig.add_trace(go.Scatter(x=x_tree, y=y_tree, mode='lines', name='Árbol',
                             line=dict(width=2, color='#EF553B'), hoverinfo='name', showlegend=False))

    # Dibujamos nodos por niveles
    levels = sorted({data["level"] for _, data in G.nodes(data=True)})
    for level in levels:
        nodes = [node for node, data in G.nodes(data=True) if data["level"] == level]
        fig.add_trace(go.Scatter(
            x=[pos[node][0] for node in nodes],
            y=[pos[node][1] for node in nodes],
            mode='markers+text',
            text=nodes,
            textposition="top center",
            hoverinfo='text',
            cliponaxis=False,
            marker=dict(size=14, color=COLORS[level % len(COLORS)], line=dict(width=2, color='DarkSlateGrey')),
            name=f"Nivel {level}",
            textfont=dict(size=12, color='black')
        ))

    fig.update_layout(
        title=dict(text=title or f"Búsqueda en anchura ({G.number_of_nodes()} semigrupos)", x=0.5, xanchor='center'),
        plot_bgcolor='white',
        showlegend=False,
        xaxis=dict(showgrid=False, zeroline=False, showticklabels=False),
        yaxis=dict(showgrid=False, zeroline=False, showticklabels=False)
    )
    return fig

def plot_search_graph(G, engine="plotly", title=None, filename="busqueda.html"):
    """
    Dibuja el grafo de una búsqueda con Frobenius fijo.

    Opciones de engine:
    'plotly': interactivo
    'pyvis': físico
    """
    if engine == "plotly":
        search_graph_figure(G, title=title).show()

    elif engine == "pyvis":
        net = Network(height='600px', width='100%', bgcolor='#222222', font_color='white',
                      directed=True, notebook=False)

        # Copia con atributos visuales: color por nivel y etiqueta x en las aristas
        H = nx.DiGraph()
        for node, data in G.nodes(data=True):
            H.add_node(node, color=COLORS[data["level"] % len(COLORS)], title=f"nivel {data['level']}")
        for u, v, data in G.edges(data=True):
            H.add_edge(u, v, title=f"x = {data['x']}", color='#EF553B' if data.get("tree") else '#888888')

        net.from_nx(H)
        net.toggle_physics(True)
        net.show(filename, notebook=False)
        logger.info("Grafo escrito en %s", filename)

    else:
        raise ValueError("El engine debe ser 'plotly' o 'pyvis'.")
