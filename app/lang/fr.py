MESSAGES = {
    "success": "Succès",
    "error": "Une erreur s'est produite",
    "validation_failed": "Échec de la validation",
    "not_found": "Ressource non trouvée",
    "internal_server_error": "Erreur interne du serveur",
    "unauthorized": "Accès non autorisé",
    "forbidden": "Accès interdit",
    "too_many_requests": "Trop de demandes",

    "created": "Ressource créée avec succès",
    "updated": "Ressource mise à jour avec succès",
    "deleted": "Ressource supprimée avec succès",
    "retrieved": "Ressource récupérée avec succès",

    "resources": {
        "quote": {
            "created": "Devis créé avec succès",
            "updated": "Devis mis à jour avec succès",
            "not_found": "Devis non trouvé",
            "retrieved": "Devis récupéré avec succès",
            "calculated": "Devis calculé avec succès",
            "invalid_parameters": "Paramètres invalides pour le calcul du devis",
            "no_routes_found": "Aucune route trouvée pour les emplacements spécifiés",
            "rate_not_available": "Tarif non disponible pour cette route",
            "unsupported_currency": "La devise :currency n'est pas prise en charge",
        },
        "rate": {
            "created": "Tarif créé avec succès",
            "updated": "Tarif mis à jour avec succès",
            "not_found": "Tarif non trouvé",
            "retrieved": "Tarif récupéré avec succès",
            "deleted": "Tarif supprimé avec succès",
            "invalid_zone": "Zone invalide spécifiée",
            "overlapping_zones": "Les zones de tarifs ne peuvent pas se chevaucher",
        },
        "location": {
            "created": "Emplacement créé avec succès",
            "updated": "Emplacement mis à jour avec succès",
            "not_found": "Emplacement non trouvé",
            "retrieved": "Emplacement récupéré avec succès",
            "deleted": "Emplacement supprimé avec succès",
            "invalid_coordinates": "Coordonnées invalides fournies",
        },
        "zone": {
            "created": "Zone créée avec succès",
            "updated": "Zone mise à jour avec succès",
            "not_found": "Zone non trouvée",
            "retrieved": "Zone récupérée avec succès",
            "deleted": "Zone supprimée avec succès",
            "invalid_geometry": "Géométrie de zone invalide",
        },
        "vehicle_type": {
            "created": "Type de véhicule créé avec succès",
            "updated": "Type de véhicule mis à jour avec succès",
            "not_found": "Type de véhicule non trouvé",
            "retrieved": "Type de véhicule récupéré avec succès",
            "deleted": "Type de véhicule supprimé avec succès",
            "has_dependents": "Le type de véhicule ne peut pas être supprimé car il a des tarifs associés",
        },
        "service_feature": {
            "created": "Caractéristique de service créée avec succès",
            "updated": "Caractéristique de service mise à jour avec succès",
            "not_found": "Caractéristique de service non trouvée",
            "retrieved": "Caractéristiques de service récupérées avec succès",
            "deleted": "Caractéristique de service supprimée avec succès",
            "has_dependents": "La caractéristique ne peut pas être supprimée car elle est assignée à des types de véhicule",
        },
        "city": {
            "created": "Ville créée avec succès",
            "updated": "Ville mise à jour avec succès",
            "not_found": "Ville non trouvée",
            "retrieved": "Ville récupérée avec succès",
            "deleted": "Ville supprimée avec succès",
            "has_dependents": "La ville ne peut pas être supprimée car elle a des zones ou des emplacements",
        },
        "highlighted_quotes": {
            "retrieved": "Devis en vedette récupérés avec succès",
            "not_found": "Devis en vedette non trouvé",
        },
        "autocomplete": {
            "retrieved": "Résultats de recherche récupérés avec succès",
        },
    },

    "validation": {
        "required": "Le champ :attribute est requis",
        "email": "Le :attribute doit être une adresse e-mail valide",
        "unique": "Le :attribute a déjà été pris",
        "min": "Le :attribute doit avoir au moins :min caractères",
        "max": "Le :attribute ne peut pas avoir plus de :max caractères",
        "numeric": "Le :attribute doit être un nombre",
        "integer": "Le :attribute doit être un entier",
        "boolean": "Le champ :attribute doit être vrai ou faux",
        "date": "Le :attribute n'est pas une date valide",
        "in": "Le :attribute sélectionné est invalide",
        "exists": "Le :attribute sélectionné n'existe pas",
        "coordinates": "Le :attribute doit être des coordonnées valides",
        "geometry": "Le :attribute doit être une géométrie valide",
        "invalid": "Le :attribute est invalide",
        "after_or_equal": "Le :attribute doit être une date postérieure ou égale à :date",
        "service_type_invalid": "Le type de service doit être l'un de : round-trip, one-way, hotel-to-hotel",
        "locations_must_be_different": "Les emplacements de départ et d'arrivée doivent être différents",
        "passenger_count_min": "Au moins 1 passager est requis",
        "passenger_count_max": "Maximum 50 passagers autorisés",
        "date_future": "La date doit être aujourd'hui ou dans le futur",
        "zone_city_mismatch": "La zone sélectionnée n'appartient pas à la ville sélectionnée",
        "location_zone_mismatch": "Le :attribute doit appartenir à la :zone spécifiée",
        "zone_has_locations": "La zone ne peut pas changer de ville tant qu'elle contient des emplacements",
        "location_pinned_by_rates": "La zone ne peut pas changer tant que des tarifs utilisent cet emplacement",
    },

    "business": {
        "invalid_route": "Route invalide spécifiée",
        "distance_calculation_failed": "Échec du calcul de distance",
        "no_available_vehicles": "Aucun véhicule disponible pour cette route",
        "price_calculation_error": "Erreur de calcul de prix",
        "zone_overlap_detected": "Chevauchement de zones détecté",
        "location_outside_service_area": "L'emplacement est en dehors de la zone de service",
    },

    "pagination": {
        "showing": "Affichage de :from à :to sur :total résultats",
        "no_results": "Aucun résultat trouvé",
        "per_page_limit": "Maximum :limit éléments par page",
    },

    "cache": {
        "cleared": "Cache vidé avec succès",
        "hit": "Données récupérées du cache",
        "miss": "Données non trouvées dans le cache",
    },
}
