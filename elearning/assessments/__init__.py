"""
E-Learning Assessments Package - EduSync

Dieses Paket enthält das Prüfungssystem der Plattform.

Features:
- Assessments mit Multiple-Choice-Fragen (Optionen A-D)
- Abgabe und Bewertung von Antworten (AssessmentScorer)
- Ein Ergebnis pro Student und Assessment (Upsert)
- Ergebnisübersicht mit Bestanden-Status

Author: EduSync Development Team
Created: 10.07.2025
Version: 1.0.0
"""
