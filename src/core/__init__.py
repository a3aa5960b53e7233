"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), et objets valeur.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- entities/ : Entites metier (VideoCandidate, VideoUnit, MovieItem)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (NamingOptions, StackedGroup, enums)
"""
