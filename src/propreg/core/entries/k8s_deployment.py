"""Registry entry for 'k8sDeployment'.

Purpose:
- A Kubernetes Deployment manifest, modeled down to containers and their ports.

Shape:
- kubernetesObject object {apiVersion, kind, metadata, spec}
    - metadata {name, namespace, labels map[scalar]}
    - spec {replicas, selector {matchLabels map[scalar]}, template {metadata, spec}}
    - template.spec.containers array[object {name, image, ports array[object], env array[object]}]
- kubernetesObjectYaml code
"""

from __future__ import annotations

from ..grammar import ScalarKind
from ..props import ArrayProp, MapProp, ObjectProp, RegistryEntry, ScalarProp


def _metadata() -> ObjectProp:
    return ObjectProp(
        name="metadata",
        label="Metadata",
        properties=(
            ScalarProp(name="name", label="Name"),
            ScalarProp(name="namespace", label="Namespace"),
            MapProp(name="labels", label="Labels", value=ScalarProp(name="labels")),
        ),
    )


_CONTAINER = ObjectProp(
    name="containers",
    properties=(
        ScalarProp(name="name", label="Name"),
        ScalarProp(name="image", label="Image"),
        ArrayProp(
            name="ports",
            label="Ports",
            item=ObjectProp(
                name="ports",
                properties=(
                    ScalarProp(name="name"),
                    ScalarProp(name="containerPort", kind=ScalarKind.NUMBER),
                    ScalarProp(name="protocol", kind=ScalarKind.SELECT),
                ),
            ),
        ),
        ArrayProp(
            name="env",
            label="Environment",
            item=ObjectProp(
                name="env",
                properties=(ScalarProp(name="name"), ScalarProp(name="value")),
            ),
        ),
    ),
)

K8S_DEPLOYMENT_ENTRY = RegistryEntry(
    entity_type="k8sDeployment",
    label="Kubernetes Deployment",
    properties=(
        ObjectProp(
            name="kubernetesObject",
            label="Kubernetes Object",
            properties=(
                ScalarProp(name="apiVersion", label="API Version"),
                ScalarProp(name="kind", label="Kind"),
                _metadata(),
                ObjectProp(
                    name="spec",
                    label="Deployment Spec",
                    properties=(
                        ScalarProp(name="replicas", label="Replicas", kind=ScalarKind.NUMBER),
                        ObjectProp(
                            name="selector",
                            label="Selector",
                            properties=(
                                MapProp(
                                    name="matchLabels",
                                    label="Match Labels",
                                    value=ScalarProp(name="matchLabels"),
                                ),
                            ),
                        ),
                        ObjectProp(
                            name="template",
                            label="Pod Template",
                            properties=(
                                _metadata(),
                                ObjectProp(
                                    name="spec",
                                    label="Pod Spec",
                                    properties=(
                                        ArrayProp(
                                            name="containers",
                                            label="Containers",
                                            item=_CONTAINER,
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
        ScalarProp(name="kubernetesObjectYaml", label="Kubernetes Object YAML", kind=ScalarKind.CODE),
    ),
)
