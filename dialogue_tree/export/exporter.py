"""
Export the dialogue graph to various formats
"""

import csv
import json
from pathlib import Path

from ..graph.graph import DialogueGraph


class DialogueExporter:
    """Export a dialogue graph to various formats"""

    CSV_FIELDS = ['ID', 'Kind', 'Node', 'Text', 'Next Node', 'Is Root', 'Is Terminal']

    def export_to_csv(self, graph: DialogueGraph, output_path: Path):
        """Export to a flat CSV: one row per node followed by one row per option"""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', newline='', encoding='utf-8') as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=self.CSV_FIELDS)
            writer.writeheader()

            for i, (node_id, node) in enumerate(graph.items(), 1):
                writer.writerow({
                    'ID': i,
                    'Kind': 'node',
                    'Node': node_id,
                    'Text': node.text,
                    'Next Node': '',
                    'Is Root': 'True' if node_id == graph.root else 'False',
                    'Is Terminal': 'True' if node.is_terminal() else 'False',
                })

                for j, option in enumerate(node.options, 1):
                    writer.writerow({
                        'ID': f"{i}.{j}",
                        'Kind': 'option',
                        'Node': node_id,
                        'Text': option.text,
                        'Next Node': option.next_node,
                        'Is Root': 'False',
                        'Is Terminal': 'False',
                    })

        return output_path

    def export_to_json(self, graph: DialogueGraph, output_path: Path):
        """Export to JSON format"""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        stats = graph.stats()
        data = {
            **graph.to_dict(),
            'metadata': {
                'version': '1.0',
                'node_count': stats['nodes'],
                'branch_count': stats['branching'],
                'terminal_count': stats['terminal'],
            }
        }

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        return output_path
