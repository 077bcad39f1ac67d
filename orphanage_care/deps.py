# orphanage_care/deps.py
from fastapi import Depends, Request

from orphanage_care.repos.accounts import AccountDirectory, donor_directory, orphanage_directory
from orphanage_care.repos.profiles import ProfileDirectory, profile_directory

def get_db(request: Request):
    # set by the lifespan in orphanage_care.main
    return request.app.state.db

def get_donors(db=Depends(get_db)) -> AccountDirectory:
    return donor_directory(db)

def get_orphanages(db=Depends(get_db)) -> AccountDirectory:
    return orphanage_directory(db)

def get_profiles(db=Depends(get_db)) -> ProfileDirectory:
    return profile_directory(db)
