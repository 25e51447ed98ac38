"""
Categorical Model Module

Finite categories given by explicit data: a set of objects, named morphisms,
and a partial composition table of declared equalities g ∘ f = h. Functors
and natural transformations between such categories are stored as plain
mappings.
"""

from typing import Dict, List, Optional, Set, Tuple
from dataclasses import dataclass, field

from .constants import identity_id


class ValidationError(ValueError):
    """Raised when an operation references unknown ids or duplicates an id."""


@dataclass
class Morphism:
    """Represents a morphism (arrow) in a category."""
    id: str
    source: str
    target: str
    label: str = ""

    def __hash__(self):
        return hash((self.id, self.source, self.target))

    def __eq__(self, other):
        if not isinstance(other, Morphism):
            return False
        return (self.id == other.id and
                self.source == other.source and
                self.target == other.target)


@dataclass
class Category:
    """
    Represents a finite category with objects, morphisms and a composition table.

    Composition is never computed: ``compose(g, f)`` only returns what was
    declared with ``set_composition``. Identities are not created implicitly;
    use ``identity`` or ``ensure_identities``.

    Attributes:
        name: Name of the category
        objects: Set of object identifiers
        morphisms: Morphisms keyed by identifier
        compositions: Declared composites, (g, f) -> h meaning g ∘ f = h
        strict_composition: Reject composites whose endpoints do not line up
    """
    name: str
    objects: Set[str] = field(default_factory=set)
    morphisms: Dict[str, Morphism] = field(default_factory=dict)
    compositions: Dict[Tuple[str, str], str] = field(default_factory=dict)
    strict_composition: bool = True

    def add_object(self, obj: str) -> None:
        """Add an object to the category."""
        if obj in self.objects:
            raise ValidationError(f"Object {obj} already present in {self.name}")
        self.objects.add(obj)

    def add_morphism(self, morphism_id: str, source: str, target: str,
                     label: str = "") -> Morphism:
        """Add a morphism between two existing objects."""
        for obj in (source, target):
            if obj not in self.objects:
                raise ValidationError(f"Object {obj} not in category {self.name}")
        if morphism_id in self.morphisms:
            raise ValidationError(f"Morphism {morphism_id} already present in {self.name}")
        morphism = Morphism(morphism_id, source, target, label)
        self.morphisms[morphism_id] = morphism
        return morphism

    def set_composition(self, g: str, f: str, h: str) -> None:
        """
        Declare that g ∘ f = h.

        Args:
            g: Morphism applied second (B → C)
            f: Morphism applied first (A → B)
            h: The composite (A → C)
        """
        for morphism_id in (g, f, h):
            if morphism_id not in self.morphisms:
                raise ValidationError(f"Morphism {morphism_id} not in category {self.name}")

        if self.strict_composition:
            mg, mf, mh = self.morphisms[g], self.morphisms[f], self.morphisms[h]
            if mf.target != mg.source:
                raise ValidationError(
                    f"Cannot compose {g} ∘ {f}: {f} ends at {mf.target} "
                    f"but {g} starts at {mg.source}"
                )
            if mh.source != mf.source or mh.target != mg.target:
                raise ValidationError(
                    f"{h}: {mh.source} → {mh.target} cannot equal {g} ∘ {f}: "
                    f"{mf.source} → {mg.target}"
                )

        self.compositions[(g, f)] = h

    def compose(self, g: str, f: str) -> Optional[str]:
        """Look up the declared composite g ∘ f, or None if undeclared."""
        return self.compositions.get((g, f))

    def identity(self, obj: str) -> Morphism:
        """Return the identity on ``obj``, registering it if missing."""
        if obj not in self.objects:
            raise ValidationError(f"Object {obj} not in category {self.name}")
        morphism_id = identity_id(obj)
        if morphism_id not in self.morphisms:
            self.morphisms[morphism_id] = Morphism(morphism_id, obj, obj, morphism_id)
        identity = self.morphisms[morphism_id]
        if identity.source != obj or identity.target != obj:
            raise ValidationError(
                f"{morphism_id} is registered as {identity.source} → {identity.target}, "
                f"not as an endomorphism of {obj}"
            )
        return identity

    def ensure_identities(self) -> None:
        """Register an identity morphism for every object."""
        for obj in sorted(self.objects):
            self.identity(obj)

    def add_unit_laws(self) -> None:
        """
        Declare f ∘ id = f and id ∘ f = f for every registered identity.

        Only identities already present are used; call ``ensure_identities``
        first to cover every object.
        """
        for morphism in list(self.morphisms.values()):
            id_source = self._registered_identity(morphism.source)
            id_target = self._registered_identity(morphism.target)
            if id_source is not None:
                self.compositions[(morphism.id, id_source)] = morphism.id
            if id_target is not None:
                self.compositions[(id_target, morphism.id)] = morphism.id

    def _registered_identity(self, obj: str) -> Optional[str]:
        """Id of the identity on ``obj`` if one is registered as obj → obj."""
        morphism = self.morphisms.get(identity_id(obj))
        if morphism is None or morphism.source != obj or morphism.target != obj:
            return None
        return morphism.id

    def hom(self, source: str, target: str) -> List[str]:
        """Identifiers of all morphisms source → target, sorted."""
        return sorted(m.id for m in self.get_morphisms_from(source) if m.target == target)

    def get_morphisms_from(self, obj: str) -> List[Morphism]:
        """Get all morphisms with the given object as source."""
        return [m for m in self.morphisms.values() if m.source == obj]


@dataclass
class Functor:
    """
    Represents a functor between two categories.

    A functor F: C → D maps objects and morphisms of C to those of D. Both
    maps are partial; categories are referenced by name.
    """
    name: str
    source_category: str
    target_category: str
    object_map: Dict[str, str] = field(default_factory=dict)
    morphism_map: Dict[str, str] = field(default_factory=dict)

    def map_object(self, obj: str) -> Optional[str]:
        """Map an object from source to target category."""
        return self.object_map.get(obj)

    def map_morphism(self, morphism_id: str) -> Optional[str]:
        """Map a morphism from source to target category."""
        return self.morphism_map.get(morphism_id)

    def add_object_mapping(self, source_obj: str, target_obj: str) -> None:
        """Add an object mapping to the functor."""
        self.object_map[source_obj] = target_obj

    def add_morphism_mapping(self, source_morph_id: str, target_morph_id: str) -> None:
        """Add a morphism mapping to the functor."""
        self.morphism_map[source_morph_id] = target_morph_id


@dataclass
class NaturalTransformation:
    """
    Represents a natural transformation between two functors.

    A natural transformation η: F ⇒ G assigns to each object X of the source
    category a morphism η_X: F(X) → G(X). Components are recorded as given;
    naturality is not checked.
    """
    name: str
    source_functor: Functor
    target_functor: Functor
    components: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate that functors have the same source and target categories."""
        if self.source_functor.source_category != self.target_functor.source_category:
            raise ValueError("Functors must have the same source category")
        if self.source_functor.target_category != self.target_functor.target_category:
            raise ValueError("Functors must have the same target category")

    def add_component(self, obj: str, morphism_id: str) -> None:
        """
        Add a component morphism for an object.

        Args:
            obj: Object in the source category
            morphism_id: Morphism F(obj) → G(obj) in the target category
        """
        self.components[obj] = morphism_id

    def component(self, obj: str) -> Optional[str]:
        """Component at ``obj``, if recorded."""
        return self.components.get(obj)
