"""
Core domain services

Directory, room allocation, surgery scheduling and the patient lifecycle,
composed by `hospital.core.hospital.Hospital`.
"""
