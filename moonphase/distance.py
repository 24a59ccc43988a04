from functools import total_ordering

# Conversion factors from 1 kilometer.
ONE_MILE = 1.609344
EARTH_RADIUS = 6378.14  # equatorial, the unit of the lunar distance model


@total_ordering
class Distance:
    """ The primary distance is kilometers (km), but it can
        also be entered or expressed in miles or Earth radii.

        This is similar to the Angle class that can be found in Skyfield.
    """
    def __init__(self, km=None, miles=None, earth_radii=None):
        if km is not None:
            self.km = km
        elif miles is not None:
            self.miles = miles
            self.km = miles * ONE_MILE
        elif earth_radii is not None:
            self.earth_radii = earth_radii
            self.km = earth_radii * EARTH_RADIUS
        else:
            raise ValueError("Enter km, miles, or earth_radii.")

    def __getattr__(self, name):
        if name == 'miles':
            self.miles = miles = self.km / ONE_MILE
            return miles
        if name == 'earth_radii':
            self.earth_radii = earth_radii = self.km / EARTH_RADIUS
            return earth_radii
        raise AttributeError(f"No attribute named {name!r}")

    def __str__(self):
        return f'{self.km:,.0f} km'

    def __repr__(self):
        return f'<{type(self).__name__} {self}>'

    def __eq__(self, other):
        return self.km == other.km

    def __lt__(self, other):
        return self.km < other.km
