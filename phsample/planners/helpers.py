infty = float('inf')

def popdefault(mapping,item,default,warning=True):
    """Extracts item from the dict mapping.  If it doesnt exist, returns
    default."""
    try:
        res =  mapping[item]
        del mapping[item]
        return res
    except KeyError:
        if warning == True:
            print("Parameter",item,"not specified, using default",default)
        elif warning is not None and warning != False:
            print(warning)
        return default
